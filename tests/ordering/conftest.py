import pytest
from protean.integrations.pytest import DomainFixture

from ordering.facts import reset_fact_provider, set_fact_provider
from ordering.facts.fake_adapter import FakeFactProvider

USER_ID = "user-001"
SHOP_ID = "shop-001"
OTHER_SHOP_ID = "shop-002"
PIZZA_ID = "menu-pizza"
PASTA_ID = "menu-pasta"
SALAD_ID = "menu-salad"


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def facts():
    """A fake fact provider seeded with one user, two open shops and three menus."""
    provider = FakeFactProvider()
    provider.register_user(USER_ID)
    provider.register_shop(SHOP_ID, open=True)
    provider.register_shop(OTHER_SHOP_ID, open=True)
    provider.register_menu(
        SHOP_ID,
        PIZZA_ID,
        name="Margherita",
        base_price=12000.0,
        options={"Large": 3000.0, "Extra cheese": 1500.0, "Thin crust": 0.0},
    )
    provider.register_menu(
        SHOP_ID,
        PASTA_ID,
        name="Carbonara",
        base_price=9000.0,
        options={"Bacon": 2000.0},
    )
    provider.register_menu(
        OTHER_SHOP_ID,
        SALAD_ID,
        name="Caesar Salad",
        base_price=7000.0,
        options={"Chicken": 2500.0},
    )

    set_fact_provider(provider)
    yield provider
    reset_fact_provider()
