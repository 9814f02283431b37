"""Unit tests for Record, RecordItem and RecordPfc entities."""

from datetime import timedelta

import pytest

from domain.record.core.entities import Record, RecordItem, RecordItemInput, RecordPfc
from domain.record.core.value_objects import Calories
from domain.shared.errors import (
    CaloriesMustBePositiveError,
    DomainValidationError,
    EatenAtMustNotBeFutureError,
    ItemNameRequiredError,
    PfcMustNotBeNegativeError,
    RecordItemsRequiredError,
)
from domain.shared.value_objects import RecordId, UserId


@pytest.fixture
def user_id() -> UserId:
    return UserId.generate()


class TestRecordCreate:
    """Test Record.create factory."""

    def test_create_valid_record(self, user_id, clock):
        eaten_at = clock.now() - timedelta(hours=4)

        record = Record.create(
            user_id,
            eaten_at,
            [RecordItemInput("rice", 250), RecordItemInput("miso soup", 40)],
            clock=clock,
        )

        assert record.user_id == user_id
        assert record.eaten_at.value == eaten_at
        assert record.created_at == clock.now()
        assert record.item_names() == ["rice", "miso soup"]
        assert record.total_calories() == Calories(290)
        assert all(item.record_id == record.id for item in record.items)

    def test_no_items_reports_only_items_required(self, user_id, clock):
        with pytest.raises(DomainValidationError) as exc_info:
            Record.create(user_id, clock.now() + timedelta(days=1), [], clock=clock)

        assert exc_info.value.errors == [RecordItemsRequiredError()]

    def test_future_eaten_at(self, user_id, clock):
        with pytest.raises(DomainValidationError) as exc_info:
            Record.create(
                user_id, clock.now() + timedelta(minutes=1), [RecordItemInput("rice", 250)], clock=clock
            )

        assert exc_info.value.errors == [EatenAtMustNotBeFutureError()]

    def test_errors_in_field_then_item_order(self, user_id, clock):
        with pytest.raises(DomainValidationError) as exc_info:
            Record.create(
                user_id,
                clock.now() + timedelta(hours=1),
                [
                    RecordItemInput("", 0),
                    RecordItemInput("rice", 250),
                    RecordItemInput("natto", -1),
                ],
                clock=clock,
            )

        assert exc_info.value.errors == [
            EatenAtMustNotBeFutureError(),
            ItemNameRequiredError(),
            CaloriesMustBePositiveError(),
            CaloriesMustBePositiveError(),
        ]


class TestRecordBehaviour:
    @pytest.fixture
    def record(self, user_id, clock) -> Record:
        return Record.create(user_id, clock.now(), [RecordItemInput("rice", 250)], clock=clock)

    def test_add_item(self, record):
        item = record.add_item("egg", 80)

        assert item.record_id == record.id
        assert record.total_calories() == Calories(330)
        assert record.item_names() == ["rice", "egg"]

    def test_add_invalid_item_leaves_record_unchanged(self, record):
        with pytest.raises(DomainValidationError):
            record.add_item("", 0)

        assert len(record.items) == 1

    def test_reconstruct(self, record):
        rebuilt = Record.reconstruct(
            id=record.id.value,
            user_id=record.user_id.value,
            eaten_at=record.eaten_at.value,
            created_at=record.created_at,
            items=[
                RecordItem.reconstruct(
                    item.id.value, item.record_id.value, item.name.value, item.calories.value
                )
                for item in record.items
            ],
        )

        assert rebuilt.id == record.id
        assert rebuilt.user_id == record.user_id
        assert rebuilt.eaten_at == record.eaten_at
        assert rebuilt.created_at == record.created_at
        assert [
            (item.id, item.record_id, item.name, item.calories) for item in rebuilt.items
        ] == [(item.id, item.record_id, item.name, item.calories) for item in record.items]

    def test_identity_equality(self, user_id, clock, record):
        other = Record.create(user_id, clock.now(), [RecordItemInput("rice", 250)], clock=clock)

        assert record != other


class TestRecordItem:
    def test_collects_both_errors(self):
        with pytest.raises(DomainValidationError) as exc_info:
            RecordItem.create(RecordId.generate(), "", 0)

        assert exc_info.value.errors == [ItemNameRequiredError(), CaloriesMustBePositiveError()]

    def test_reconstruct(self):
        record_id = RecordId.generate()
        item = RecordItem.create(record_id, "rice", 250)

        rebuilt = RecordItem.reconstruct(item.id.value, record_id.value, "rice", 250)

        assert rebuilt == item
        assert rebuilt.calories == Calories(250)


class TestRecordPfc:
    def test_create(self):
        record_id = RecordId.generate()

        record_pfc = RecordPfc.create(record_id, 20.0, 10.5, 80.0)

        assert record_pfc.record_id == record_id
        assert (record_pfc.protein, record_pfc.fat, record_pfc.carbs) == (20.0, 10.5, 80.0)

    def test_negative_amount(self):
        with pytest.raises(DomainValidationError) as exc_info:
            RecordPfc.create(RecordId.generate(), -1, 0, 0)

        assert exc_info.value.errors == [PfcMustNotBeNegativeError()]
