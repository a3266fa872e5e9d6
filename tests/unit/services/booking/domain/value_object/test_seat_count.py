import pytest

from services.booking.domain.value_object import Passenger, SeatCount


class TestSeatCount:
    """SeatCount のテスト"""

    def test_positive_integer(self):
        assert SeatCount(3).value == 3
        assert int(SeatCount(3)) == 3

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_raises_error(self, value):
        with pytest.raises(ValueError, match="must be positive"):
            SeatCount(value)

    @pytest.mark.parametrize("value", [1.5, "2", True])
    def test_non_integer_raises_error(self, value):
        with pytest.raises(ValueError, match="must be an integer"):
            SeatCount(value)


class TestPassenger:
    """Passenger のテスト"""

    def test_fields_are_kept_as_given(self):
        """名前・メールアドレスは形式チェックせずそのまま保持する"""
        passenger = Passenger(name="  asha ", email="not-an-email")
        assert passenger.name == "  asha "
        assert passenger.email == "not-an-email"
