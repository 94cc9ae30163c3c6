"""Book registry tests."""
import threading

import pytest

from book_registry.core.exceptions import AlreadyBorrowedError, NotFoundError, ValidationError
from book_registry.schemas.book import BookDraft
from book_registry.services.registry import DELETE_CONFIRMATION, BookRegistry


def draft(**overrides) -> BookDraft:
    fields = {"title": "Dune", "author": "Herbert"}
    fields.update(overrides)
    return BookDraft(**fields)


def test_dune_walkthrough(registry: BookRegistry):
    book = registry.create(draft())
    assert book.id == 1
    assert book.borrowed is False

    book = registry.borrow(1, "alice")
    assert book.borrowed is True
    assert book.borrowed_by == "alice"

    with pytest.raises(AlreadyBorrowedError):
        registry.borrow(1, "bob")

    book = registry.return_book(1)
    assert book.borrowed is False
    assert book.borrowed_by is None

    assert registry.stats() == {"total_books": 1, "borrowed": 0}


@pytest.mark.parametrize("field", ["title", "author"])
@pytest.mark.parametrize("value", ["", "   ", None])
def test_create_requires_title_and_author(registry: BookRegistry, field, value):
    with pytest.raises(ValidationError) as exc_info:
        registry.create(draft(**{field: value}))
    assert field in exc_info.value.fields
    assert registry.stats()["total_books"] == 0


def test_create_reports_every_violated_field(registry: BookRegistry):
    with pytest.raises(ValidationError) as exc_info:
        registry.create(BookDraft(publication_year=2101))
    assert set(exc_info.value.fields) == {"title", "author", "publicationYear"}


@pytest.mark.parametrize("year", [999, 2101])
def test_create_rejects_out_of_range_year(registry: BookRegistry, year):
    with pytest.raises(ValidationError) as exc_info:
        registry.create(draft(publication_year=year))
    assert "publicationYear" in exc_info.value.fields


@pytest.mark.parametrize("year", [1000, 2100])
def test_create_accepts_boundary_years(registry: BookRegistry, year):
    book = registry.create(draft(publication_year=year))
    assert book.publication_year == year


def test_create_ignores_draft_id_and_borrow_flags(registry: BookRegistry):
    book = registry.create(draft(id=42, borrowed=True, borrowed_by="mallory"))
    assert book.id == 1
    assert book.borrowed is False
    assert book.borrowed_by is None


def test_ids_increase_and_are_never_reused(registry: BookRegistry):
    ids = [registry.create(draft()).id for _ in range(3)]
    registry.delete(ids[-1])
    registry.delete(ids[0])
    ids.extend(registry.create(draft()).id for _ in range(2))
    assert ids == [1, 2, 3, 4, 5]


def test_concurrent_creates_get_unique_ids(registry: BookRegistry):
    ids = []
    ids_lock = threading.Lock()

    def worker():
        created = [registry.create(draft()).id for _ in range(200)]
        with ids_lock:
            ids.extend(created)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(ids) == list(range(1, 1601))
    assert registry.stats()["total_books"] == 1600


def test_concurrent_borrows_have_one_winner(registry: BookRegistry):
    book_id = registry.create(draft()).id
    winners = []
    losers = []

    def worker(user_id: str):
        try:
            registry.borrow(book_id, user_id)
            winners.append(user_id)
        except AlreadyBorrowedError:
            losers.append(user_id)

    threads = [threading.Thread(target=worker, args=(f"user-{i}",)) for i in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(winners) == 1
    assert len(losers) == 15
    assert registry.get(book_id).borrowed_by == winners[0]


def test_failed_create_does_not_consume_an_id(registry: BookRegistry):
    with pytest.raises(ValidationError):
        registry.create(draft(title=""))
    assert registry.create(draft()).id == 1


def test_get_returns_created_record(registry: BookRegistry):
    created = registry.create(draft(genre="Science Fiction", publication_year=1965))
    assert registry.get(created.id) == created


def test_get_missing_raises_not_found(registry: BookRegistry):
    with pytest.raises(NotFoundError):
        registry.get(7)
    assert registry.find(7) is None


def test_returned_records_are_snapshots(registry: BookRegistry):
    created = registry.create(draft())
    created.title = "Changed"
    registry.get(created.id).borrowed = True
    stored = registry.get(created.id)
    assert stored.title == "Dune"
    assert stored.borrowed is False


def test_list_without_filters_returns_all_in_insertion_order(registry: BookRegistry):
    registry.create(draft(title="A"))
    registry.create(draft(title="B"))
    assert [b.title for b in registry.list()] == ["A", "B"]


def test_list_filters_match_author_or_genre(registry: BookRegistry):
    registry.create(draft(title="Dune", author="Herbert", genre="SF"))
    registry.create(draft(title="Emma", author="Austen", genre="Romance"))
    registry.create(draft(title="Solaris", author="Lem", genre="SF"))

    assert [b.title for b in registry.list(author="Austen")] == ["Emma"]
    assert [b.title for b in registry.list(genre="SF")] == ["Dune", "Solaris"]
    # Either field matching is enough
    assert [b.title for b in registry.list(author="Austen", genre="SF")] == [
        "Dune",
        "Emma",
        "Solaris",
    ]
    assert registry.list(author="Nobody") == []


def test_update_replaces_all_fields_and_keeps_path_id(registry: BookRegistry):
    created = registry.create(draft(genre="SF", publication_year=1965))
    updated = registry.update(
        created.id,
        BookDraft(id=99, title="Dune Messiah", author="Frank Herbert"),
    )
    assert updated.id == created.id
    assert updated.title == "Dune Messiah"
    assert updated.genre is None
    assert updated.publication_year is None
    assert registry.find(99) is None
    assert registry.get(created.id) == updated


def test_update_can_set_borrow_state(registry: BookRegistry):
    created = registry.create(draft())
    updated = registry.update(created.id, draft(borrowed=True, borrowed_by="carol"))
    assert updated.borrowed is True
    assert updated.borrowed_by == "carol"
    assert registry.stats()["borrowed"] == 1


def test_update_drops_borrower_when_not_borrowed(registry: BookRegistry):
    created = registry.create(draft())
    updated = registry.update(created.id, draft(borrowed=False, borrowed_by="carol"))
    assert updated.borrowed_by is None


def test_update_requires_borrower_when_borrowed(registry: BookRegistry):
    created = registry.create(draft())
    with pytest.raises(ValidationError) as exc_info:
        registry.update(created.id, draft(borrowed=True))
    assert "borrowedBy" in exc_info.value.fields


def test_update_missing_raises_not_found_before_validation(registry: BookRegistry):
    with pytest.raises(NotFoundError):
        registry.update(5, BookDraft())


def test_update_invalid_leaves_record_untouched(registry: BookRegistry):
    created = registry.create(draft())
    with pytest.raises(ValidationError):
        registry.update(created.id, draft(publication_year=999))
    assert registry.get(created.id) == created


def test_delete_is_idempotent(registry: BookRegistry):
    created = registry.create(draft())
    assert registry.delete(created.id) == DELETE_CONFIRMATION
    with pytest.raises(NotFoundError):
        registry.get(created.id)
    assert registry.delete(created.id) == DELETE_CONFIRMATION


def test_borrow_return_borrow(registry: BookRegistry):
    created = registry.create(draft())
    registry.borrow(created.id, "alice")
    registry.return_book(created.id)
    book = registry.borrow(created.id, "bob")
    assert book.borrowed_by == "bob"


def test_borrow_requires_user_id(registry: BookRegistry):
    created = registry.create(draft())
    with pytest.raises(ValidationError) as exc_info:
        registry.borrow(created.id, " ")
    assert "userId" in exc_info.value.fields


def test_borrow_and_return_missing_book(registry: BookRegistry):
    with pytest.raises(NotFoundError):
        registry.borrow(3, "alice")
    with pytest.raises(NotFoundError):
        registry.return_book(3)


def test_return_never_borrowed_book(registry: BookRegistry):
    created = registry.create(draft())
    book = registry.return_book(created.id)
    assert book.borrowed is False
    assert book.borrowed_by is None


def test_stats_track_borrow_and_return(registry: BookRegistry):
    first = registry.create(draft())
    registry.create(draft(title="Emma", author="Austen"))
    assert registry.stats() == {"total_books": 2, "borrowed": 0}

    registry.borrow(first.id, "alice")
    assert registry.stats() == {"total_books": 2, "borrowed": 1}

    registry.return_book(first.id)
    assert registry.stats() == {"total_books": 2, "borrowed": 0}

    registry.delete(first.id)
    assert registry.stats() == {"total_books": 1, "borrowed": 0}
