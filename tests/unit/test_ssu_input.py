"""Unit tests for the SSU instrument input."""

import io
import logging

import numpy as np
import pytest

from rt_options.inputs import SSUInput, SubInput
from rt_options.core.constants import SSU_MAX_N_CHANNELS


class TestSSUInput:
    """Tests for SSUInput construction and validation."""

    def test_defaults(self):
        """Test default mission time and cell pressures."""
        ssu = SSUInput()
        assert ssu.time == 0.0
        assert ssu.n_channels == SSU_MAX_N_CHANNELS
        np.testing.assert_array_equal(ssu.cell_pressure, np.zeros(3))
        assert not ssu.cell_pressure_is_set()

    def test_satisfies_protocol(self):
        """Test SSUInput provides the sub-input capability."""
        assert isinstance(SSUInput(), SubInput)

    def test_cell_pressure_shape(self):
        """Test cell pressure must have one value per channel."""
        with pytest.raises(ValueError, match="3 elements"):
            SSUInput(cell_pressure=[1.0, 2.0])

    def test_cell_pressure_copied(self):
        """Test the constructor copies the supplied cell pressures."""
        pressures = np.array([1.0, 2.0, 3.0])
        ssu = SSUInput(cell_pressure=pressures)
        pressures[0] = 99.0
        assert ssu.cell_pressure[0] == 1.0

    def test_default_valid(self):
        """Test the default input is valid."""
        assert SSUInput().is_valid()

    def test_negative_time(self, caplog):
        """Test a negative mission time is invalid."""
        with caplog.at_level(logging.INFO):
            assert not SSUInput(time=-1.0).is_valid()
        assert "Invalid mission time" in caplog.text

    def test_negative_cell_pressure(self, caplog):
        """Test a negative cell pressure is invalid."""
        with caplog.at_level(logging.INFO):
            assert not SSUInput(cell_pressure=[1.0, -2.0, 3.0]).is_valid()
        assert "Invalid cell pressure" in caplog.text

    def test_all_problems_reported(self, caplog):
        """Test both problems are reported in one call."""
        ssu = SSUInput(time=-5.0, cell_pressure=[-1.0, 0.0, 0.0])
        with caplog.at_level(logging.INFO):
            assert not ssu.is_valid()
        assert "Invalid mission time" in caplog.text
        assert "Invalid cell pressure" in caplog.text


class TestSSUInputAccess:
    """Tests for get_value/set_value."""

    def test_set_time(self):
        """Test setting the mission time."""
        ssu = SSUInput()
        ssu.set_value(time=1985.25)
        time, cell_pressure, n_channels = ssu.get_value()
        assert time == 1985.25
        assert cell_pressure is None
        assert n_channels == 3

    def test_set_cell_pressure(self):
        """Test setting a channel cell pressure with 1-based channels."""
        ssu = SSUInput()
        ssu.set_value(cell_pressure=10.5, channel=1)
        ssu.set_value(cell_pressure=30.0, channel=3)
        assert ssu.cell_pressure_is_set()
        assert ssu.get_value(channel=1)[1] == 10.5
        assert ssu.get_value(channel=2)[1] == 0.0
        assert ssu.get_value(channel=3)[1] == 30.0

    @pytest.mark.parametrize("channel", [0, 4, -1])
    def test_invalid_channel(self, channel):
        """Test out-of-range channels are ignored."""
        ssu = SSUInput()
        ssu.set_value(cell_pressure=10.0, channel=channel)
        assert not ssu.cell_pressure_is_set()
        assert ssu.get_value(channel=channel)[1] is None

    def test_cell_pressure_without_channel(self):
        """Test a cell pressure without a channel is ignored."""
        ssu = SSUInput()
        ssu.set_value(cell_pressure=10.0)
        assert not ssu.cell_pressure_is_set()


class TestSSUInputEquality:
    """Tests for SSUInput equality and display."""

    def test_equal(self):
        """Test equal inputs."""
        a = SSUInput(time=1980.0, cell_pressure=[1.0, 2.0, 3.0])
        b = SSUInput(time=1980.0, cell_pressure=[1.0, 2.0, 3.0])
        assert a == b

    def test_time_differs(self):
        """Test mission time is compared."""
        assert SSUInput(time=1980.0) != SSUInput(time=1981.0)

    def test_cell_pressure_differs(self):
        """Test cell pressures are compared."""
        a = SSUInput()
        b = SSUInput()
        b.set_value(cell_pressure=0.5, channel=2)
        assert a != b

    def test_inspect(self):
        """Test the display layout."""
        stream = io.StringIO()
        SSUInput(time=1984.5).inspect(stream)
        text = stream.getvalue()
        assert "SSU_Input OBJECT" in text
        assert "1.984500e+03" in text

    def test_dict_round_trip(self):
        """Test dictionary conversion."""
        ssu = SSUInput(time=1979.0, cell_pressure=[4.0, 5.0, 6.0])
        assert SSUInput.from_dict(ssu.to_dict()) == ssu
        assert SSUInput.from_dict({}) == SSUInput()
