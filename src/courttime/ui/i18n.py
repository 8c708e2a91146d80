"""Internationalisation strings for the Courttime UI.

Usage::

    from courttime.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_start)                         # "Старт"
    print(t().capacity_notice.format(limit=5))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_export_csv: str
    menu_quit: str
    menu_language: str

    status_ready: str
    status_exported: str  # "Exported: {name}"
    status_export_failed: str  # "Export failed: {msg}"
    status_roster_saved: str  # "Saved roster: {name}"
    status_roster_loaded: str  # "Loaded roster: {name}"
    status_period_complete: str  # "{label} complete"
    capacity_notice: str  # "Only {limit} players can be on court..."
    export_title: str
    csv_filter: str

    # ── Clock panel ──────────────────────────────────────────────────────
    clock_period: str
    clock_remaining: str
    clock_game: str
    kpi_ideal: str
    kpi_goal: str
    kpi_on_court: str  # "{active}/{limit} on court"
    needs_subs: str
    btn_start: str
    btn_pause: str
    btn_next_period: str
    btn_reset: str

    # ── Config panel ─────────────────────────────────────────────────────
    cfg_players: str
    cfg_on_court: str
    cfg_format: str
    cfg_period_minutes: str
    cfg_baseline: str
    cfg_view: str
    cfg_roster_name: str
    cfg_saved_rosters: str
    format_quarters: str
    format_halves: str
    baseline_goal: str
    baseline_ideal: str
    view_current: str
    view_completed: str
    btn_auto_fill: str
    btn_save_roster: str
    btn_load_roster: str
    btn_delete_roster: str

    # ── Player table ─────────────────────────────────────────────────────
    col_on_court: str
    col_player: str
    col_total: str
    col_delta_goal: str
    col_delta_ideal: str
    col_progress: str

    # ── Minutes chart ────────────────────────────────────────────────────
    chart_title: str
    chart_tooltip: str  # "{name}: {minutes} min"

    # ── Timeouts / overtime ──────────────────────────────────────────────
    timeouts_title: str
    timeouts_left: str  # "{remaining} of {cap} left"
    btn_use_timeout: str
    btn_undo_timeout: str
    btn_add_overtime: str
    overtime_title: str
    overtime_count: str  # "OT periods: {count}"


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Courttime",
    menu_game="&Game",
    menu_export_csv="&Export CSV...",
    menu_quit="&Quit",
    menu_language="&Language",
    status_ready="Ready",
    status_exported="Exported: {name}",
    status_export_failed="Export failed: {msg}",
    status_roster_saved="Saved roster: {name}",
    status_roster_loaded="Loaded roster: {name}",
    status_period_complete="{label} complete",
    capacity_notice="Only {limit} players can be on court. Remove someone first!",
    export_title="Export playing time",
    csv_filter="CSV files (*.csv)",
    clock_period="Period",
    clock_remaining="Remaining",
    clock_game="Game time",
    kpi_ideal="Ideal so far",
    kpi_goal="Goal / player",
    kpi_on_court="{active}/{limit} on court",
    needs_subs="Check subs",
    btn_start="Start",
    btn_pause="Pause",
    btn_next_period="Next period",
    btn_reset="Reset",
    cfg_players="Players:",
    cfg_on_court="On court:",
    cfg_format="Format:",
    cfg_period_minutes="Period length:",
    cfg_baseline="Compare to:",
    cfg_view="Period columns:",
    cfg_roster_name="Roster name:",
    cfg_saved_rosters="Saved rosters:",
    format_quarters="Quarters",
    format_halves="Halves",
    baseline_goal="Goal",
    baseline_ideal="Ideal so far",
    view_current="Current",
    view_completed="Completed only",
    btn_auto_fill="Auto-fill",
    btn_save_roster="Save",
    btn_load_roster="Load",
    btn_delete_roster="Delete",
    col_on_court="On",
    col_player="Player",
    col_total="Total",
    col_delta_goal="Δ vs Goal",
    col_delta_ideal="Δ vs Ideal",
    col_progress="Progress",
    chart_title="Total minutes by player",
    chart_tooltip="{name}: {minutes} min",
    timeouts_title="Timeouts",
    timeouts_left="{remaining} of {cap} left",
    btn_use_timeout="Use",
    btn_undo_timeout="Undo",
    btn_add_overtime="+ OT",
    overtime_title="Overtime",
    overtime_count="OT periods: {count}",
)

_RU = Strings(
    window_title="Courttime",
    menu_game="&Игра",
    menu_export_csv="&Экспорт CSV...",
    menu_quit="&Выход",
    menu_language="&Язык",
    status_ready="Готово",
    status_exported="Экспортировано: {name}",
    status_export_failed="Ошибка экспорта: {msg}",
    status_roster_saved="Состав сохранён: {name}",
    status_roster_loaded="Состав загружен: {name}",
    status_period_complete="{label} завершён",
    capacity_notice=(
        "На площадке может быть только {limit}. Сначала замените кого-нибудь!"
    ),
    export_title="Экспорт игрового времени",
    csv_filter="Файлы CSV (*.csv)",
    clock_period="Период",
    clock_remaining="Осталось",
    clock_game="Время игры",
    kpi_ideal="Норма на сейчас",
    kpi_goal="Цель на игрока",
    kpi_on_court="{active}/{limit} на площадке",
    needs_subs="Проверьте замены",
    btn_start="Старт",
    btn_pause="Пауза",
    btn_next_period="Следующий период",
    btn_reset="Сброс",
    cfg_players="Игроков:",
    cfg_on_court="На площадке:",
    cfg_format="Формат:",
    cfg_period_minutes="Длина периода:",
    cfg_baseline="Сравнивать с:",
    cfg_view="Столбцы периодов:",
    cfg_roster_name="Название состава:",
    cfg_saved_rosters="Сохранённые составы:",
    format_quarters="Четверти",
    format_halves="Половины",
    baseline_goal="Цель",
    baseline_ideal="Норма на сейчас",
    view_current="Текущий",
    view_completed="Только завершённые",
    btn_auto_fill="Автоподбор",
    btn_save_roster="Сохранить",
    btn_load_roster="Загрузить",
    btn_delete_roster="Удалить",
    col_on_court="В игре",
    col_player="Игрок",
    col_total="Всего",
    col_delta_goal="Δ к цели",
    col_delta_ideal="Δ к норме",
    col_progress="Прогресс",
    chart_title="Минуты по игрокам",
    chart_tooltip="{name}: {minutes} мин",
    timeouts_title="Тайм-ауты",
    timeouts_left="Осталось {remaining} из {cap}",
    btn_use_timeout="Взять",
    btn_undo_timeout="Отменить",
    btn_add_overtime="+ ОТ",
    overtime_title="Овертайм",
    overtime_count="Овертаймов: {count}",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
