"""Menu aggregate — a shop's menu and the option groups customers choose from.

A menu starts as a draft and is published once with ``open()``. Publishing,
and removing option groups from a published menu, are gated by the same
structural rules:

1. at least one option group;
2. between 1 and 3 required option groups;
3. at least one group offering a paid option.

There is no way back from published to draft.
"""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, String, Text

from shop.domain import shop
from shop.menu.errors import MenuError, MenuErrorCode
from shop.menu.events import MenuCreated, MenuOpened

MAX_REQUIRED_OPTION_GROUPS = 3


@shop.value_object(part_of="Menu")
class Option:
    """A selectable choice within an option group. Identified by name and price."""

    name: String(required=True, max_length=255)
    price: Float(default=0.0, min_value=0.0)

    @property
    def is_paid(self) -> bool:
        return (self.price or 0.0) > 0

    def to_dict(self) -> dict:
        return {"name": self.name, "price": self.price}


@shop.entity(part_of="Menu")
class OptionGroup:
    name: String(required=True, max_length=255)
    required: Boolean(default=False)
    options: Text(default="[]")  # JSON: list of {name, price}

    @property
    def option_list(self) -> list[Option]:
        return [Option(**raw) for raw in json.loads(self.options or "[]")]

    @property
    def has_paid_options(self) -> bool:
        return any(option.is_paid for option in self.option_list)

    def _store(self, options: list[Option]) -> None:
        self.options = json.dumps([o.to_dict() for o in options])

    def add_option(self, name, price) -> Option:
        if name is None or not str(name).strip():
            raise MenuError(MenuErrorCode.NEW_OPTION_NAME_REQUIRED)
        if price is None:
            raise MenuError(MenuErrorCode.NEW_OPTION_PRICE_REQUIRED)
        if price < 0:
            raise MenuError(MenuErrorCode.INVALID_OPTION_PRICE)

        option = Option(name=str(name).strip(), price=float(price))
        options = self.option_list
        if option in options:
            raise MenuError(MenuErrorCode.DUPLICATE_OPTION, f"{option.name} ({option.price})")

        self._store(options + [option])
        return option

    def change_option_name(self, current_name, current_price, new_name) -> Option:
        options = self.option_list
        index = next(
            (
                i
                for i, option in enumerate(options)
                if option.name == current_name.strip() and option.price == float(current_price)
            ),
            None,
        )
        if index is None:
            raise MenuError(MenuErrorCode.OPTION_NOT_FOUND, current_name)

        renamed = Option(name=new_name.strip(), price=options[index].price)
        if renamed in options[:index] + options[index + 1 :]:
            raise MenuError(MenuErrorCode.DUPLICATE_OPTION, f"{renamed.name} ({renamed.price})")

        options[index] = renamed
        self._store(options)
        return renamed


@shop.aggregate
class Menu:
    shop_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    base_price: Float(required=True, min_value=0.0)
    is_open: Boolean(default=False)
    option_groups: HasMany(OptionGroup)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def option_group_names_must_be_unique(self):
        names = [group.name for group in self.option_groups]
        if len(names) != len(set(names)):
            raise ValidationError({"option_groups": ["Option group names must be unique within a menu"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, shop_id, name, description=None, base_price=None):
        if not shop_id:
            raise MenuError(MenuErrorCode.SHOP_ID_REQUIRED)
        if name is None or not name.strip():
            raise MenuError(MenuErrorCode.MENU_NAME_REQUIRED)
        if base_price is None:
            raise MenuError(MenuErrorCode.BASE_PRICE_REQUIRED)
        if base_price < 0:
            raise MenuError(MenuErrorCode.INVALID_BASE_PRICE)

        now = datetime.now(UTC)
        menu = cls(
            shop_id=shop_id,
            name=name.strip(),
            description=description.strip() if description else None,
            base_price=float(base_price),
            is_open=False,
            created_at=now,
            updated_at=now,
        )
        menu.raise_(
            MenuCreated(
                menu_id=str(menu.id),
                shop_id=str(menu.shop_id),
                name=menu.name,
                base_price=menu.base_price,
            )
        )
        return menu

    # -------------------------------------------------------------------
    # Publication rules
    # -------------------------------------------------------------------
    @property
    def required_group_count(self) -> int:
        return sum(1 for group in self.option_groups if group.required)

    @staticmethod
    def publication_violation(groups) -> MenuErrorCode | None:
        """Return the first publication rule the given groups break, if any."""
        if not groups:
            return MenuErrorCode.INSUFFICIENT_OPTION_GROUPS

        required = sum(1 for group in groups if group.required)
        if not 1 <= required <= MAX_REQUIRED_OPTION_GROUPS:
            return MenuErrorCode.INVALID_REQUIRED_OPTION_GROUP_COUNT

        if not any(group.has_paid_options for group in groups):
            return MenuErrorCode.NO_PAID_OPTION_GROUP

        return None

    def open(self) -> MenuOpened:
        """Publish the menu."""
        violation = self.publication_violation(list(self.option_groups))
        if violation:
            raise MenuError(violation)
        if self.is_open:
            raise MenuError(MenuErrorCode.MENU_ALREADY_OPEN)

        self.is_open = True
        self.updated_at = datetime.now(UTC)

        self.raise_(
            MenuOpened(
                menu_id=str(self.id),
                shop_id=str(self.shop_id),
                name=self.name,
                description=self.description,
            )
        )
        return self._events[-1]

    # -------------------------------------------------------------------
    # Option groups
    # -------------------------------------------------------------------
    def find_option_group(self, option_group_id) -> OptionGroup:
        if not option_group_id:
            raise MenuError(MenuErrorCode.OPTION_GROUP_ID_REQUIRED)

        group = next((g for g in self.option_groups if str(g.id) == str(option_group_id)), None)
        if group is None:
            raise MenuError(MenuErrorCode.OPTION_GROUP_NOT_FOUND, str(option_group_id))
        return group

    def _assert_name_available(self, name, exclude_id=None):
        if any(g.name == name for g in self.option_groups if str(g.id) != str(exclude_id)):
            raise MenuError(MenuErrorCode.DUPLICATE_OPTION_GROUP_NAME, name)

    def add_option_group(self, name, required=False) -> OptionGroup:
        if name is None or not name.strip():
            raise MenuError(MenuErrorCode.NEW_OPTION_GROUP_NAME_REQUIRED)

        name = name.strip()
        self._assert_name_available(name)

        if self.is_open and required and self.required_group_count >= MAX_REQUIRED_OPTION_GROUPS:
            raise MenuError(MenuErrorCode.MAX_REQUIRED_OPTION_GROUPS_EXCEEDED)

        group = OptionGroup(name=name, required=bool(required))
        self.add_option_groups(group)
        self.updated_at = datetime.now(UTC)
        return group

    def add_option(self, option_group_id, name, price) -> Option:
        option = self.find_option_group(option_group_id).add_option(name, price)
        self.updated_at = datetime.now(UTC)
        return option

    def change_option_group_name(self, option_group_id, new_name):
        group = self.find_option_group(option_group_id)
        if new_name is None or not new_name.strip():
            raise MenuError(MenuErrorCode.NEW_OPTION_GROUP_NAME_REQUIRED)

        new_name = new_name.strip()
        self._assert_name_available(new_name, exclude_id=group.id)

        group.name = new_name
        self.updated_at = datetime.now(UTC)

    def change_option_name(self, option_group_id, current_name, current_price, new_name) -> Option:
        if not option_group_id:
            raise MenuError(MenuErrorCode.OPTION_GROUP_ID_REQUIRED)
        if current_name is None or not current_name.strip():
            raise MenuError(MenuErrorCode.CURRENT_OPTION_NAME_REQUIRED)
        if current_price is None:
            raise MenuError(MenuErrorCode.CURRENT_OPTION_PRICE_REQUIRED)
        if new_name is None or not new_name.strip():
            raise MenuError(MenuErrorCode.NEW_OPTION_NAME_REQUIRED)

        option = self.find_option_group(option_group_id).change_option_name(current_name, current_price, new_name)
        self.updated_at = datetime.now(UTC)
        return option

    def remove_option_group(self, option_group_id):
        """Remove a group. A published menu must stay publishable afterwards."""
        group = self.find_option_group(option_group_id)

        if self.is_open:
            remaining = [g for g in self.option_groups if str(g.id) != str(group.id)]
            if self.publication_violation(remaining):
                raise MenuError(MenuErrorCode.CANNOT_DELETE_REQUIRED_OPTION_GROUP, group.name)

        self.remove_option_groups(group)
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Published view
    # -------------------------------------------------------------------
    def to_facts(self) -> dict:
        """The menu as other contexts read it."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "basePrice": self.base_price,
            "open": self.is_open,
            "optionGroups": [
                {
                    "id": str(group.id),
                    "name": group.name,
                    "required": group.required,
                    "options": [o.to_dict() for o in group.option_list],
                }
                for group in self.option_groups
            ],
        }
