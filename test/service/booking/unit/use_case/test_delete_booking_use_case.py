"""Unit tests for DeleteBookingUseCase"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import attrs
import pytest
from uuid_utils.compat import uuid7

from src.service.booking.app.command.delete_booking_use_case import DeleteBookingUseCase
from src.service.booking.domain.booking_errors import BookingNotFoundError, ShowModifiedError
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.show_entity import OCCUPANCY_WRITE_ATTEMPTS, Show
from src.service.booking.domain.value_object.booking_user import BookingUser


@pytest.fixture
def booking() -> Booking:
    return Booking(
        id=uuid7(),
        user=BookingUser(name='Alice', user_id='user_1'),
        show_id=1,
        seats=['A1', 'A2'],
        total_price=20.0,
        booking_date=datetime(2025, 7, 1, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def show() -> Show:
    return Show(
        id=1,
        movie_id=10,
        show_date_time=datetime(2025, 7, 1, 19, 30, tzinfo=timezone.utc),
        show_price=10.0,
        occupied_seats={'A1': 'occupied', 'A2': 'occupied', 'B1': 'occupied'},
        version=4,
    )


@pytest.fixture
def delete_booking_use_case(mock_uow: AsyncMock) -> DeleteBookingUseCase:
    return DeleteBookingUseCase(uow=mock_uow)


@pytest.mark.unit
class TestDeleteBookingUseCase:
    @pytest.mark.asyncio
    async def test_delete_releases_seats_and_removes_booking(
        self,
        delete_booking_use_case: DeleteBookingUseCase,
        mock_uow: AsyncMock,
        booking: Booking,
        show: Show,
    ) -> None:
        # Arrange
        mock_uow.booking_command_repo.get_for_user.return_value = booking
        mock_uow.show_command_repo.get_by_id.return_value = show
        mock_uow.show_command_repo.update_occupancy.side_effect = (
            lambda *, show, expected_version: attrs.evolve(show, version=expected_version + 1)
        )

        # Act
        deleted = await delete_booking_use_case.delete_booking_for_user(user_id='user_1')

        # Assert
        assert deleted.id == booking.id
        mock_uow.booking_command_repo.get_for_user.assert_awaited_once_with(
            user_id='user_1', booking_id=None
        )
        update_kwargs = mock_uow.show_command_repo.update_occupancy.call_args.kwargs
        assert update_kwargs['show'].occupied_seats == {'B1': 'occupied'}
        assert update_kwargs['expected_version'] == 4
        mock_uow.booking_command_repo.delete.assert_awaited_once_with(booking_id=booking.id)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_by_id_passes_booking_id(
        self,
        delete_booking_use_case: DeleteBookingUseCase,
        mock_uow: AsyncMock,
        booking: Booking,
        show: Show,
    ) -> None:
        # Arrange
        mock_uow.booking_command_repo.get_for_user.return_value = booking
        mock_uow.show_command_repo.get_by_id.return_value = show
        mock_uow.show_command_repo.update_occupancy.return_value = show

        # Act
        await delete_booking_use_case.delete_booking_for_user(
            user_id='user_1', booking_id=booking.id
        )

        # Assert
        mock_uow.booking_command_repo.get_for_user.assert_awaited_once_with(
            user_id='user_1', booking_id=booking.id
        )

    @pytest.mark.asyncio
    async def test_no_matching_booking_raises_not_found_without_mutation(
        self,
        delete_booking_use_case: DeleteBookingUseCase,
        mock_uow: AsyncMock,
    ) -> None:
        # Arrange
        mock_uow.booking_command_repo.get_for_user.return_value = None

        # Act & Assert
        with pytest.raises(BookingNotFoundError) as exc_info:
            await delete_booking_use_case.delete_booking_for_user(user_id='nobody')

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == 'No record exists'
        mock_uow.show_command_repo.update_occupancy.assert_not_awaited()
        mock_uow.booking_command_repo.delete.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_seats_already_free_skip_show_update(
        self,
        delete_booking_use_case: DeleteBookingUseCase,
        mock_uow: AsyncMock,
        booking: Booking,
        show: Show,
    ) -> None:
        # Arrange
        mock_uow.booking_command_repo.get_for_user.return_value = booking
        mock_uow.show_command_repo.get_by_id.return_value = attrs.evolve(
            show, occupied_seats={'B1': 'occupied'}
        )

        # Act
        await delete_booking_use_case.delete_booking_for_user(user_id='user_1')

        # Assert
        mock_uow.show_command_repo.update_occupancy.assert_not_awaited()
        mock_uow.booking_command_repo.delete.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_concurrent_show_change_rereads_before_release(
        self,
        delete_booking_use_case: DeleteBookingUseCase,
        mock_uow: AsyncMock,
        booking: Booking,
        show: Show,
    ) -> None:
        """Another booking landed on the show between read and write"""
        # Arrange
        moved_show = attrs.evolve(
            show, occupied_seats={**show.occupied_seats, 'C1': 'occupied'}, version=5
        )
        mock_uow.booking_command_repo.get_for_user.return_value = booking
        mock_uow.show_command_repo.get_by_id.side_effect = [show, moved_show]
        mock_uow.show_command_repo.update_occupancy.side_effect = [
            None,
            attrs.evolve(moved_show, version=6),
        ]

        # Act
        await delete_booking_use_case.delete_booking_for_user(user_id='user_1')

        # Assert
        retry_kwargs = mock_uow.show_command_repo.update_occupancy.call_args.kwargs
        assert retry_kwargs['expected_version'] == 5
        assert retry_kwargs['show'].occupied_seats == {'B1': 'occupied', 'C1': 'occupied'}
        mock_uow.booking_command_repo.delete.assert_awaited_once_with(booking_id=booking.id)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_show_change_on_every_attempt_aborts_delete(
        self,
        delete_booking_use_case: DeleteBookingUseCase,
        mock_uow: AsyncMock,
        booking: Booking,
        show: Show,
    ) -> None:
        # Arrange
        mock_uow.booking_command_repo.get_for_user.return_value = booking
        mock_uow.show_command_repo.get_by_id.return_value = show
        mock_uow.show_command_repo.update_occupancy.return_value = None

        # Act & Assert
        with pytest.raises(ShowModifiedError):
            await delete_booking_use_case.delete_booking_for_user(user_id='user_1')

        assert (
            mock_uow.show_command_repo.update_occupancy.await_count == OCCUPANCY_WRITE_ATTEMPTS
        )
        mock_uow.booking_command_repo.delete.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()
