"""cell_classifier 테스트."""

from datetime import date, datetime

from calpicker.config import PickerConfig
from calpicker.models import DateList, DateRange, DayFlags, DisabledConfig, Weekday
from calpicker.services.cell_classifier import build_month_view, classify_day


def _d(day: int) -> date:
    return date(2026, 10, day)


PREFIXES = ("Start", "End")


def _range_flags(day, selection, **kwargs):
    return classify_day(
        day,
        selection,
        allow_range=True,
        accessibility_label_prefixes=PREFIXES,
        **kwargs,
    )


class TestEmptySlot:
    def test_all_flags_false(self):
        flags = classify_day(
            None,
            DateRange(_d(1), _d(5)),
            hover_date=_d(3),
            disabled=DisabledConfig(after=_d(1)),
            allow_range=True,
        )
        assert flags == DayFlags()

    def test_absent_everything(self):
        flags = classify_day(_d(5), None)
        assert not flags.selected
        assert not flags.in_range
        assert not flags.disabled
        assert not flags.in_hovering_range
        assert flags.accessibility_label_prefix is None


class TestCompleteRange:
    selection = DateRange(_d(5), _d(9))

    def test_endpoints(self):
        first = _range_flags(_d(5), self.selection)
        last = _range_flags(_d(9), self.selection)
        assert first.is_first_selected_day and not first.is_last_selected_day
        assert last.is_last_selected_day and not last.is_first_selected_day
        assert first.selected and last.selected

    def test_in_range_inclusive(self):
        assert _range_flags(_d(5), self.selection).in_range
        assert _range_flags(_d(7), self.selection).in_range
        assert _range_flags(_d(9), self.selection).in_range
        assert not _range_flags(_d(10), self.selection).in_range

    def test_middle_day_is_not_selected(self):
        flags = _range_flags(_d(7), self.selection)
        assert not flags.selected
        assert not flags.is_first_selected_day
        assert not flags.is_last_selected_day

    def test_hover_never_previews_complete_range(self):
        for day in range(1, 32):
            flags = _range_flags(_d(day), self.selection, hover_date=_d(20))
            assert not flags.in_hovering_range

    def test_range_is_different(self):
        assert _range_flags(_d(7), self.selection).range_is_different

    def test_range_flags_require_range_mode(self):
        flags = classify_day(_d(7), self.selection)
        assert not flags.in_range
        assert not flags.is_first_selected_day
        assert not classify_day(_d(9), self.selection).is_last_selected_day


class TestHoverPreview:
    selection = DateRange(_d(5), _d(5))

    def test_hovering_range_after_start(self):
        hover = _d(8)
        in_preview = [
            day
            for day in range(1, 32)
            if _range_flags(_d(day), self.selection, hover_date=hover).in_hovering_range
        ]
        assert in_preview == [6, 7, 8]

    def test_hover_day_is_preview_last_day(self):
        flags = _range_flags(_d(8), self.selection, hover_date=_d(8))
        assert flags.is_last_selected_day
        assert flags.accessibility_label_prefix == "End"
        assert not _range_flags(_d(7), self.selection, hover_date=_d(8)).is_last_selected_day

    def test_start_stays_first_day(self):
        flags = _range_flags(_d(5), self.selection, hover_date=_d(8))
        assert flags.is_first_selected_day
        assert not flags.is_last_selected_day
        assert not flags.in_hovering_range
        assert flags.accessibility_label_prefix == "Start"

    def test_hover_on_selected_day_adds_no_preview(self):
        for day in range(1, 32):
            flags = _range_flags(_d(day), self.selection, hover_date=_d(5))
            assert not flags.in_hovering_range
            assert not flags.is_last_selected_day

    def test_hover_before_start_adds_no_preview(self):
        for day in range(1, 32):
            flags = _range_flags(_d(day), self.selection, hover_date=_d(2))
            assert not flags.in_hovering_range
            assert not flags.is_last_selected_day

    def test_no_hover(self):
        flags = _range_flags(_d(6), self.selection)
        assert not flags.in_hovering_range
        assert not flags.hovering_right

    def test_hovering_right(self):
        assert _range_flags(_d(6), self.selection, hover_date=_d(8)).hovering_right
        assert not _range_flags(_d(8), self.selection, hover_date=_d(8)).hovering_right

    def test_degenerate_range_is_not_different(self):
        assert not _range_flags(_d(5), self.selection).range_is_different

    def test_preview_requires_range_mode(self):
        flags = classify_day(_d(7), self.selection, hover_date=_d(8))
        assert not flags.in_hovering_range


class TestOtherModes:
    def test_multi_date(self):
        selection = DateList((_d(3), _d(12)))
        flags = classify_day(_d(12), selection, multi_date=True)
        assert flags.selected
        assert not flags.in_range
        assert not flags.range_is_different

    def test_no_selection_is_different(self):
        assert classify_day(_d(3), None).range_is_different

    def test_list_selection_in_range_mode(self):
        flags = classify_day(_d(3), [_d(3)], allow_range=True)
        assert flags.selected
        assert not flags.in_range
        assert not flags.is_first_selected_day


class TestLabelPrefix:
    def test_range_middle_has_no_prefix(self):
        flags = _range_flags(_d(7), DateRange(_d(5), _d(9)))
        assert flags.accessibility_label_prefix is None

    def test_range_first_prefix_absent(self):
        flags = classify_day(
            _d(5),
            DateRange(_d(5), _d(9)),
            allow_range=True,
            accessibility_label_prefixes=(None, "End"),
        )
        assert flags.accessibility_label_prefix is None

    def test_single_mode_prefixes_selected_days(self):
        selection = DateRange(_d(5), _d(5))
        selected = classify_day(_d(5), selection, accessibility_label_prefixes=("Chosen", "End"))
        other = classify_day(_d(6), selection, accessibility_label_prefixes=("Chosen", "End"))
        assert selected.accessibility_label_prefix == "Chosen"
        assert other.accessibility_label_prefix is None

    def test_multi_mode_prefixes_every_selected_day(self):
        selection = DateList((_d(3), _d(12)))
        for day in (3, 12):
            flags = classify_day(
                _d(day), selection, multi_date=True, accessibility_label_prefixes=("Chosen", "End")
            )
            assert flags.accessibility_label_prefix == "Chosen"


class TestDisabledAndFocus:
    def test_disabled_rules(self):
        disabled = DisabledConfig(before=_d(3), after=_d(28), explicit=(_d(15),))
        assert classify_day(_d(2), None, disabled=disabled).disabled
        assert classify_day(_d(15), None, disabled=disabled).disabled
        assert classify_day(_d(29), None, disabled=disabled).disabled
        assert not classify_day(_d(16), None, disabled=disabled).disabled

    def test_focused(self):
        assert classify_day(_d(4), None, focused_date=datetime(2026, 10, 4, 12)).focused
        assert not classify_day(_d(5), None, focused_date=_d(4)).focused


class TestBuildMonthView:
    def test_current_month_and_weekday(self, range_config):
        view = build_month_view(9, 2026, config=range_config, now=date(2026, 10, 18))
        assert view.current
        assert view.name == "october"
        assert view.last_day_of_month == date(2026, 10, 31)
        current = [h for h in view.weekdays if h.current]
        assert len(current) == 1
        assert current[0].weekday == Weekday.SUNDAY
        assert current[0].name == "sunday"

    def test_other_month_is_not_current(self, range_config):
        view = build_month_view(10, 2026, config=range_config, now=date(2026, 10, 18))
        assert not view.current
        assert not any(h.current for h in view.weekdays)

    def test_same_month_other_year_is_not_current(self, range_config):
        view = build_month_view(9, 2025, config=range_config, now=date(2026, 10, 18))
        assert not view.current

    def test_headers_follow_week_start(self, range_config):
        view = build_month_view(9, 2026, config=range_config, now=date(2026, 10, 18))
        assert [h.name for h in view.weekdays][:2] == ["monday", "tuesday"]
        assert view.weekdays[-1].weekday == Weekday.SUNDAY

    def test_cells_carry_column_weekday(self, range_config):
        view = build_month_view(9, 2026, config=range_config, now=date(2026, 10, 18))
        first_week = view.weeks[0]
        assert first_week[0].day is None
        assert first_week[0].weekday == Weekday.MONDAY
        assert first_week[3].day == date(2026, 10, 1)
        assert first_week[3].weekday == Weekday.THURSDAY

    def test_classifies_selection(self, range_config):
        view = build_month_view(
            9,
            2026,
            config=range_config,
            now=date(2026, 10, 18),
            selection=DateRange(_d(5), _d(5)),
            hover_date=_d(7),
        )
        cells = {c.day: c.flags for week in view.weeks for c in week if c.day is not None}
        assert cells[_d(5)].is_first_selected_day
        assert cells[_d(6)].in_hovering_range
        assert cells[_d(7)].is_last_selected_day
        assert cells[_d(7)].accessibility_label_prefix == "End"
        assert not cells[_d(8)].in_hovering_range

    def test_disabled_from_config(self):
        config = PickerConfig(disable_dates_before=_d(10), disable_specific_dates=[_d(20)])
        view = build_month_view(9, 2026, config=config, now=date(2026, 10, 18))
        cells = {c.day: c.flags for week in view.weeks for c in week if c.day is not None}
        assert cells[_d(9)].disabled
        assert not cells[_d(10)].disabled
        assert cells[_d(20)].disabled

    def test_explicit_disabled_overrides_config(self):
        config = PickerConfig(disable_dates_before=_d(10))
        view = build_month_view(
            9, 2026, config=config, now=date(2026, 10, 18), disabled=DisabledConfig()
        )
        assert not any(c.flags.disabled for week in view.weeks for c in week)

    def test_mismatched_selection_is_ignored(self):
        config = PickerConfig(multi_date=True)
        view = build_month_view(
            9, 2026, config=config, now=date(2026, 10, 18), selection=DateRange(_d(5), _d(9))
        )
        assert not any(c.flags.selected for week in view.weeks for c in week)

    def test_last_supported_month(self, range_config):
        view = build_month_view(11, 9999, config=range_config, now=date(2026, 10, 18))
        assert view.last_day_of_month == date.max
        assert not view.current

    def test_empty_slots_are_never_disabled(self):
        config = PickerConfig(disable_dates_after=date(2000, 1, 1))
        view = build_month_view(9, 2026, config=config, now=date(2026, 10, 18))
        empty = [c for week in view.weeks for c in week if c.day is None]
        assert empty
        assert not any(c.flags.disabled for c in empty)
