"""Unit tests for passenger classification - covering status rules and name formatting"""
import pytest
from src.models.pnr import Passenger
from src.models.report import PassengerStatus
from src.processing.classification import (
    classify_status,
    format_passenger_name,
    classify_passenger,
    classify_passengers
)


def make_passenger(name="Rahul", age=28, gender="M", booking="B1", current="B1") -> Passenger:
    """Helper to create a passenger"""
    return Passenger.model_validate({
        "name": name, "age": age, "gender": gender, "booking": booking, "current": current
    })


class TestStatusRules:
    """Test FR: Status derived from current status code"""

    def test_cancelled(self):
        assert classify_status("CAN") == PassengerStatus.CANCELLED

    @pytest.mark.parametrize("current", ["WL1", "WL12", "WL"])
    def test_waiting(self, current):
        assert classify_status(current) == PassengerStatus.WAITING

    @pytest.mark.parametrize("current", ["RAC", "RAC3", "RAC15"])
    def test_rac(self, current):
        assert classify_status(current) == PassengerStatus.RAC

    @pytest.mark.parametrize("current", ["B1", "S4", "A2", "CNF", "CANX", "can", "", "GNWL"])
    def test_everything_else_confirmed(self, current):
        """Test that unrecognised codes fall back to CONFIRMED"""
        assert classify_status(current) == PassengerStatus.CONFIRMED

    def test_cancelled_requires_exact_match(self):
        """Test that codes merely starting with CAN are not cancelled"""
        assert classify_status("CAN1") == PassengerStatus.CONFIRMED

    def test_status_compares_to_text(self):
        """Test that statuses compare equal to their labels"""
        assert classify_status("WL5") == "WAITING"


class TestNameFormatting:
    """Test FR: formattedName is padded name plus (age/gender)"""

    def test_short_name_padded_to_twenty(self):
        formatted = format_passenger_name("Rahul", 28, "M")
        assert formatted == "Rahul" + " " * 15 + "(28/M)"
        assert formatted.index("(") == 20

    def test_long_name_not_truncated(self):
        name = "Venkatanarasimharajuvaripeta"
        assert format_passenger_name(name, 60, "F") == name + "(60/F)"

    def test_exact_width_name(self):
        name = "A" * 20
        assert format_passenger_name(name, 5, "M") == name + "(5/M)"

    def test_integral_float_age(self):
        assert format_passenger_name("Priya", 25.0, "F").endswith("(25/F)")

    def test_fractional_age(self):
        assert format_passenger_name("Baby", 0.5, "F").endswith("(0.5/F)")


class TestPassengerDisplay:
    """Test FR: Display record per passenger"""

    def test_confirmed_display(self):
        display = classify_passenger(make_passenger(booking="WL5", current="B3"))
        assert display.booking_status == "WL5"
        assert display.current_status == "B3"
        assert display.status_label == PassengerStatus.CONFIRMED
        assert display.is_confirmed is True

    @pytest.mark.parametrize("current", ["WL8", "RAC2", "CAN"])
    def test_non_confirmed_display(self, current):
        display = classify_passenger(make_passenger(current=current))
        assert display.is_confirmed is False

    def test_order_preserved(self):
        """Test that output order matches input order"""
        passengers = [
            make_passenger(name="First", current="WL1"),
            make_passenger(name="Second", current="B1"),
            make_passenger(name="Third", current="CAN"),
        ]
        displays = classify_passengers(passengers)
        assert [d.formatted_name.split()[0] for d in displays] == ["First", "Second", "Third"]
        assert [d.status_label for d in displays] == ["WAITING", "CONFIRMED", "CANCELLED"]
