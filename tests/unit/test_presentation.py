"""
Unit tests for the progress bar and sync toggle helpers.
"""

from utils.presentation import progress_bar_style, SyncToggle


class TestProgressBarStyle:

    def test_width_is_percentage(self):
        assert progress_bar_style(42) == {"width": "42%"}

    def test_fractional_percentage(self):
        assert progress_bar_style(12.5) == {"width": "12.5%"}

    def test_values_are_not_clamped(self):
        assert progress_bar_style(150) == {"width": "150%"}
        assert progress_bar_style(-5) == {"width": "-5%"}

    def test_long_fraction_is_not_rounded(self):
        assert progress_bar_style(33.3333333) == {"width": "33.3333333%"}

    def test_large_value_is_not_scientific(self):
        assert progress_bar_style(1234567) == {"width": "1234567%"}
        assert progress_bar_style(1234567.0) == {"width": "1234567%"}


class TestSyncToggle:

    def test_toggle_reports_negated_value(self):
        received = []
        toggle = SyncToggle(is_synced=True, on_toggle=received.append)

        toggle.toggle()

        assert received == [False]

    def test_toggle_does_not_change_own_state(self):
        received = []
        toggle = SyncToggle(is_synced=False, on_toggle=received.append)

        toggle.toggle()
        toggle.toggle()

        assert received == [True, True]
        assert toggle.is_synced is False

    def test_label_follows_state(self):
        assert SyncToggle(True, lambda v: None).label == "Sincronizado"
        assert SyncToggle(False, lambda v: None).label == "Independiente"
