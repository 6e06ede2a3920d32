import math

from voxbox.sandbox.hud import clock_label, status_line


def test_clock_label_follows_the_sun():
    assert clock_label(0.0) == "06:00"
    assert clock_label(math.pi / 2) == "12:00"
    assert clock_label(math.pi) == "18:00"


def test_status_line_mentions_selection():
    line = status_line("wood", 59.6, 0.0, 1234)
    assert "block: wood" in line
    assert "1234 blocks" in line
    assert "60 fps" in line
