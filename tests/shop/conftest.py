import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def shop_bed():
    from shop.domain import shop

    bed = DomainFixture(shop)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shop_bed):
    with shop_bed.domain_context():
        yield
