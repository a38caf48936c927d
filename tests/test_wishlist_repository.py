import pytest
from pydantic import ValidationError

from src.api.models.product_model.wishlistsModel import WishlistRead
from src.api.models.usersModel import User
from src.api.models.product_model.wishlist_schemas import WishlistReadWithProduct
from src.api.services.product_repository import ProductRepository
from src.api.services.wishlist_repository import WishlistRepository


@pytest.fixture
def repo(session):
    return WishlistRepository(session)


@pytest.fixture
def lamp(session, notifier, product_data):
    return ProductRepository(session, notifier=notifier).save(product_data)


def test_save_requires_user_and_product(repo, owner, lamp):
    with pytest.raises(ValidationError):
        repo.save({"user_id": owner.id})
    with pytest.raises(ValidationError):
        repo.save({"product_id": lamp.id})


def test_save_allows_duplicate_pairs(repo, owner, lamp):
    first = repo.save({"user_id": owner.id, "product_id": lamp.id})
    second = repo.save({"user_id": owner.id, "product_id": lamp.id})

    assert first.id != second.id
    assert len(repo.find({"user_id": owner.id})) == 2


def test_find_populates_product_by_default(repo, owner, lamp):
    repo.save({"user_id": owner.id, "product_id": lamp.id})

    items = repo.find({"user_id": owner.id})

    assert isinstance(items[0], WishlistReadWithProduct)
    assert items[0].product.id == lamp.id
    assert items[0].product.name == "Desk Lamp"
    assert items[0].product.images == ["https://cdn.example.com/lamp-front.jpg"]


def test_find_one_without_populate(repo, owner, lamp):
    item = repo.save({"user_id": owner.id, "product_id": lamp.id})

    result = repo.find_one({"id": item.id}, auto_populate=False)

    assert type(result) is WishlistRead
    assert result.product_id == lamp.id
    assert not hasattr(result, "product")


def test_find_by_id(repo, owner, lamp):
    item = repo.save({"user_id": owner.id, "product_id": lamp.id})

    assert repo.find_by_id(item.id).product.id == lamp.id
    assert repo.find_by_id(9999) is None


def test_populate_product_resolves_and_is_idempotent(repo, session, owner, lamp, monkeypatch):
    repo.save({"user_id": owner.id, "product_id": lamp.id})

    populated = repo.populate_product(repo.find(auto_populate=False))
    assert populated[0].product.id == lamp.id
    assert populated == repo.find()

    def no_queries(*args, **kwargs):
        raise AssertionError("already populated results must not hit the database")

    monkeypatch.setattr(session, "exec", no_queries)
    again = repo.populate_product(populated)
    assert all(a is b for a, b in zip(again, populated))


def test_delete(repo, owner, lamp):
    item = repo.save({"user_id": owner.id, "product_id": lamp.id})

    assert repo.delete(item.id) is True
    assert repo.find_by_id(item.id) is None
    assert repo.delete(item.id) is False


def test_count_per_user(repo, session, owner, lamp):
    other = User(name="Other Shopper", email="other@example.com")
    session.add(other)
    session.commit()
    session.refresh(other)

    for _ in range(3):
        repo.save({"user_id": owner.id, "product_id": lamp.id})
    repo.save({"user_id": other.id, "product_id": lamp.id})

    assert repo.count({"user_id": owner.id}) == 3
    assert repo.count({"user_id": other.id}) == 1
    assert repo.count() == 4
