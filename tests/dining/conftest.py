import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture

from dining.access.user import Country, Role, User
from dining.menu.restaurant import MenuItem, Restaurant


@pytest.fixture(scope="session")
def dining_bed():
    from dining.domain import dining

    bed = DomainFixture(dining)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(dining_bed):
    with dining_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Requesters
# ---------------------------------------------------------------------------
@pytest.fixture()
def india_member():
    return User(id="user-in-member-1", role=Role.MEMBER, country=Country.INDIA, email="asha@example.in")


@pytest.fixture()
def india_member_2():
    return User(id="user-in-member-2", role=Role.MEMBER, country=Country.INDIA, email="ravi@example.in")


@pytest.fixture()
def india_manager():
    return User(id="user-in-manager", role=Role.MANAGER, country=Country.INDIA, email="meera@example.in")


@pytest.fixture()
def india_admin():
    return User(id="user-in-admin", role=Role.ADMIN, country=Country.INDIA, email="nick@example.in")


@pytest.fixture()
def america_admin():
    return User(id="user-us-admin", role=Role.ADMIN, country=Country.AMERICA, email="nora@example.com")


@pytest.fixture()
def america_member():
    return User(id="user-us-member", role=Role.MEMBER, country=Country.AMERICA, email="travis@example.com")


@pytest.fixture()
def america_manager():
    return User(id="user-us-manager", role=Role.MANAGER, country=Country.AMERICA, email="carol@example.com")


@pytest.fixture()
def requester_fields():
    """Command fields carrying a requester."""

    def _fields(user):
        return {
            "user_id": user.id,
            "user_role": user.role.value,
            "user_country": user.country.value,
        }

    return _fields


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------
def _seed_restaurant(name, country, dishes):
    restaurant = Restaurant.register(name=name, country=country)
    current_domain.repository_for(Restaurant).add(restaurant)

    ids = {}
    for key, (dish, price) in dishes.items():
        item = MenuItem(restaurant_id=str(restaurant.id), name=dish, price=price)
        current_domain.repository_for(MenuItem).add(item)
        ids[key] = str(item.id)
    return str(restaurant.id), ids


@pytest.fixture()
def menu(_ctx):
    """Two restaurants, one per country. Returns menu item ids by short name."""
    india_id, india_items = _seed_restaurant(
        "Spice Route",
        Country.INDIA.value,
        {"butter_chicken": ("Butter Chicken", 14.50), "paneer_tikka": ("Paneer Tikka", 11.25)},
    )
    america_id, america_items = _seed_restaurant(
        "Liberty Diner",
        Country.AMERICA.value,
        {"cheeseburger": ("Cheeseburger", 9.99), "fries": ("Fries", 3.50)},
    )
    return {"india_restaurant": india_id, "america_restaurant": america_id, **india_items, **america_items}
