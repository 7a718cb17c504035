from __future__ import annotations

import argparse
import logging
import math
import sys
from dataclasses import dataclass

try:
    from PySide6.QtCharts import (
        QBarCategoryAxis,
        QBarSeries,
        QBarSet,
        QCategoryAxis,
        QChart,
        QChartView,
        QLineSeries,
        QPolarChart,
        QValueAxis,
    )
    from PySide6.QtCore import QLocale, Qt
    from PySide6.QtGui import QColor, QDoubleValidator, QPainter
    from PySide6.QtWidgets import (
        QApplication,
        QCheckBox,
        QComboBox,
        QFormLayout,
        QFrame,
        QGridLayout,
        QHBoxLayout,
        QLabel,
        QLineEdit,
        QMainWindow,
        QMessageBox,
        QProgressBar,
        QPushButton,
        QScrollArea,
        QSpinBox,
        QStackedWidget,
        QTabWidget,
        QVBoxLayout,
        QWidget,
    )
except ModuleNotFoundError as exc:  # pragma: no cover
    raise SystemExit(
        "PySide6 is not installed. Install it with: "
        "python3 -m pip install PySide6"
    ) from exc

from fightcord.constants import AGE_RANGE, DEFAULT_HEIGHT, MAX_STAT, MIN_STAT
from fightcord.game import configure_logging
from fightcord.models import (
    Athletic,
    Discipline,
    FighterProfile,
    FighterStats,
    FightExperience,
    FormChoice,
    Gender,
    Personality,
)
from fightcord.modules.fight_analysis import (
    FightAnalysis,
    analyze_fight,
    format_stat_name,
    format_stat_value,
)
from fightcord.modules.fighter_form import ProfileValidationError, build_profile

logger = logging.getLogger(__name__)

USER_COLOR = "#8884d8"
OPPONENT_COLOR = "#82ca9d"


@dataclass
class _ProfileForm:
    """Widgets backing one fighter's form tab."""

    height_input: QLineEdit
    weight_input: QLineEdit
    age_input: QSpinBox
    gender_input: QComboBox
    athletic_input: QComboBox
    fight_experience_input: QComboBox
    personality_input: QComboBox
    discipline_inputs: dict[Discipline, QCheckBox]

    def to_profile(self) -> FighterProfile:
        if self.weight_input.text().strip() and not self.weight_input.hasAcceptableInput():
            raise ProfileValidationError("Weight must be a number.")
        return build_profile(
            height=self.height_input.text(),
            weight=self.weight_input.text(),
            age=str(self.age_input.value()),
            gender=self.gender_input.currentText(),
            athletic=self.athletic_input.currentText(),
            fight_experience=self.fight_experience_input.currentText(),
            personality=self.personality_input.currentText(),
            fighting_disciplines=[
                discipline for discipline, box in self.discipline_inputs.items() if box.isChecked()
            ],
        )

    def reset(self) -> None:
        self.height_input.clear()
        self.weight_input.clear()
        self.age_input.setValue(AGE_RANGE[0])
        for combo in (
            self.gender_input,
            self.athletic_input,
            self.fight_experience_input,
            self.personality_input,
        ):
            combo.setCurrentIndex(-1)
        for box in self.discipline_inputs.values():
            box.setChecked(False)


def _choice_combo(choice_type: type[FormChoice], placeholder: str) -> QComboBox:
    combo = QComboBox()
    combo.addItems(choice_type.labels())
    combo.setPlaceholderText(placeholder)
    combo.setCurrentIndex(-1)
    return combo


def _weight_validator(parent: QLineEdit) -> QDoubleValidator:
    # Dot decimals only, whatever the system locale.
    locale = QLocale.c()
    locale.setNumberOptions(QLocale.NumberOption.RejectGroupSeparator)
    validator = QDoubleValidator(parent)
    validator.setLocale(locale)
    return validator


def _bar_value(value: float) -> int:
    if not math.isfinite(value):
        return int(MIN_STAT)
    return int(round(max(MIN_STAT, min(MAX_STAT, value))))


class FightCordWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("FightCord")
        self.resize(1080, 820)

        self.user_profile: FighterProfile | None = None
        self.analysis: FightAnalysis | None = None

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.form_page = self._build_form_page()
        self.analysis_page = self._build_analysis_page()

        self.stack.addWidget(self.form_page)
        self.stack.addWidget(self.analysis_page)
        self.stack.setCurrentWidget(self.form_page)

    def _build_form_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(48, 36, 48, 36)
        layout.setSpacing(16)

        title = QLabel("Welcome to FightCord")
        title.setStyleSheet("font-size: 30px; font-weight: 700;")
        subtitle = QLabel(
            "Compare your fighting potential against others and get a detailed "
            "analysis of your combat prowess."
        )
        subtitle.setWordWrap(True)
        subtitle.setStyleSheet("font-size: 15px; color: #4f5d75;")

        self.tabs = QTabWidget()
        self.user_form, user_tab = self._build_profile_tab("Enter Your Details", "Next", self._submit_user)
        self.opponent_form, opponent_tab = self._build_profile_tab(
            "Enter Opponent's Details", "Submit and Analyze", self._submit_opponent,
        )
        self.tabs.addTab(user_tab, "Your Information")
        self.tabs.addTab(opponent_tab, "Opponent Information")
        self.tabs.setTabEnabled(1, False)

        layout.addWidget(title)
        layout.addWidget(subtitle)
        layout.addWidget(self.tabs, 1)
        return page

    def _build_profile_tab(self, heading: str, submit_label: str, on_submit) -> tuple[_ProfileForm, QWidget]:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        layout.setSpacing(14)

        title = QLabel(heading)
        title.setStyleSheet("font-size: 22px; font-weight: 700;")
        layout.addWidget(title)

        form_card = QFrame()
        form_card.setFrameShape(QFrame.Shape.StyledPanel)
        form_card.setStyleSheet("QFrame { padding: 8px; }")
        form_layout = QFormLayout(form_card)
        form_layout.setLabelAlignment(Qt.AlignmentFlag.AlignRight)
        form_layout.setVerticalSpacing(12)
        form_layout.setHorizontalSpacing(16)

        height_input = QLineEdit()
        height_input.setPlaceholderText(DEFAULT_HEIGHT)

        weight_input = QLineEdit()
        weight_input.setValidator(_weight_validator(weight_input))

        age_input = QSpinBox()
        age_input.setRange(*AGE_RANGE)

        gender_input = _choice_combo(Gender, "Select gender")
        athletic_input = _choice_combo(Athletic, "Select option")
        fight_experience_input = _choice_combo(FightExperience, "Select option")
        personality_input = _choice_combo(Personality, "Select personality type")

        discipline_row = QHBoxLayout()
        discipline_inputs: dict[Discipline, QCheckBox] = {}
        for discipline in Discipline:
            box = QCheckBox(discipline.value)
            discipline_inputs[discipline] = box
            discipline_row.addWidget(box)
        discipline_row.addStretch(1)

        form_layout.addRow("Height (feet & inches)", height_input)
        form_layout.addRow("Weight (lbs)", weight_input)
        form_layout.addRow("Age", age_input)
        form_layout.addRow("Gender", gender_input)
        form_layout.addRow("Are you athletic?", athletic_input)
        form_layout.addRow("How many fights have you been in?", fight_experience_input)
        form_layout.addRow("What is your overall personality type?", personality_input)
        form_layout.addRow("Fighting Disciplines", discipline_row)

        submit_button = QPushButton(submit_label)
        submit_button.setMinimumHeight(42)
        submit_button.clicked.connect(on_submit)

        layout.addWidget(form_card)
        layout.addWidget(submit_button)
        layout.addStretch(1)

        form = _ProfileForm(
            height_input=height_input,
            weight_input=weight_input,
            age_input=age_input,
            gender_input=gender_input,
            athletic_input=athletic_input,
            fight_experience_input=fight_experience_input,
            personality_input=personality_input,
            discipline_inputs=discipline_inputs,
        )
        return form, tab

    def _build_analysis_page(self) -> QWidget:
        page = QWidget()
        root = QVBoxLayout(page)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(14)

        header = QLabel("Fight Analysis")
        header.setStyleSheet("font-size: 26px; font-weight: 700;")
        self.headline_label = QLabel("")
        self.headline_label.setWordWrap(True)
        self.headline_label.setStyleSheet("font-size: 18px; font-weight: 600;")
        self.score_label = QLabel("")
        self.score_label.setStyleSheet("font-size: 13px; color: #4f5d75;")

        root.addWidget(header)
        root.addWidget(self.headline_label)
        root.addWidget(self.score_label)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setSpacing(12)

        stats_row = QHBoxLayout()
        stats_row.setSpacing(24)
        self.user_stats_grid = QGridLayout()
        self.opponent_stats_grid = QGridLayout()
        for heading, grid in (
            ("Your Stats", self.user_stats_grid),
            ("Opponent Stats", self.opponent_stats_grid),
        ):
            column = QVBoxLayout()
            label = QLabel(heading)
            label.setStyleSheet("font-size: 20px; font-weight: 700;")
            column.addWidget(label)
            column.addLayout(grid)
            column.addStretch(1)
            stats_row.addLayout(column, 1)
        content_layout.addLayout(stats_row)

        self.bar_chart_view = QChartView()
        self.bar_chart_view.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.bar_chart_view.setMinimumHeight(380)
        self.radar_chart_view = QChartView()
        self.radar_chart_view.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.radar_chart_view.setMinimumHeight(420)
        content_layout.addWidget(self.bar_chart_view)
        content_layout.addWidget(self.radar_chart_view)

        scroll.setWidget(content)
        root.addWidget(scroll, 1)

        again_button = QPushButton("New Comparison")
        again_button.setMinimumHeight(40)
        again_button.clicked.connect(self._start_over)
        root.addWidget(again_button)
        return page

    def _submit_user(self) -> None:
        try:
            self.user_profile = self.user_form.to_profile()
        except ProfileValidationError as exc:
            logger.debug("Rejected your profile: %s", exc)
            QMessageBox.warning(self, "Invalid Input", str(exc))
            return

        self.tabs.setTabEnabled(1, True)
        self.tabs.setCurrentIndex(1)

    def _submit_opponent(self) -> None:
        if self.user_profile is None:
            self.tabs.setCurrentIndex(0)
            return

        try:
            opponent_profile = self.opponent_form.to_profile()
        except ProfileValidationError as exc:
            logger.debug("Rejected opponent profile: %s", exc)
            QMessageBox.warning(self, "Invalid Input", str(exc))
            return

        self.analysis = analyze_fight(self.user_profile, opponent_profile)
        self._refresh_analysis_view()
        self.stack.setCurrentWidget(self.analysis_page)

    def _start_over(self) -> None:
        self.user_profile = None
        self.analysis = None
        self.user_form.reset()
        self.opponent_form.reset()
        self.tabs.setTabEnabled(1, False)
        self.tabs.setCurrentIndex(0)
        self.stack.setCurrentWidget(self.form_page)

    def _refresh_analysis_view(self) -> None:
        if self.analysis is None:
            return

        analysis = self.analysis
        self.headline_label.setText(analysis.headline)
        self.score_label.setText(
            f"Total Score: You {analysis.user_score:.2f} | "
            f"Opponent {analysis.opponent_score:.2f}"
        )
        self._fill_stats_grid(self.user_stats_grid, analysis.user_stats)
        self._fill_stats_grid(self.opponent_stats_grid, analysis.opponent_stats)
        self.bar_chart_view.setChart(self._build_bar_chart(analysis))
        self.radar_chart_view.setChart(self._build_radar_chart(analysis))

    def _fill_stats_grid(self, grid: QGridLayout, stats: FighterStats) -> None:
        while grid.count():
            item = grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        for row, (key, value) in enumerate(stats.to_dict().items()):
            name_label = QLabel(format_stat_name(key))
            value_label = QLabel(format_stat_value(value))
            value_label.setAlignment(Qt.AlignmentFlag.AlignRight)
            bar = QProgressBar()
            bar.setRange(int(MIN_STAT), int(MAX_STAT))
            bar.setValue(_bar_value(value))
            bar.setTextVisible(False)
            bar.setMaximumHeight(8)
            grid.addWidget(name_label, row * 2, 0)
            grid.addWidget(value_label, row * 2, 1)
            grid.addWidget(bar, row * 2 + 1, 0, 1, 2)

    def _build_bar_chart(self, analysis: FightAnalysis) -> QChart:
        rows = analysis.comparison_rows()
        user_set = QBarSet("You")
        user_set.setColor(QColor(USER_COLOR))
        opponent_set = QBarSet("Opponent")
        opponent_set.setColor(QColor(OPPONENT_COLOR))
        for _, user_value, opponent_value in rows:
            user_set.append(user_value)
            opponent_set.append(opponent_value)

        series = QBarSeries()
        series.append(user_set)
        series.append(opponent_set)

        chart = QChart()
        chart.setTitle("Comparison")
        chart.addSeries(series)

        axis_x = QBarCategoryAxis()
        axis_x.append([label for label, _, _ in rows])
        chart.addAxis(axis_x, Qt.AlignmentFlag.AlignBottom)
        series.attachAxis(axis_x)

        axis_y = QValueAxis()
        axis_y.setRange(MIN_STAT, MAX_STAT)
        chart.addAxis(axis_y, Qt.AlignmentFlag.AlignLeft)
        series.attachAxis(axis_y)

        chart.legend().setVisible(True)
        chart.legend().setAlignment(Qt.AlignmentFlag.AlignBottom)
        return chart

    def _build_radar_chart(self, analysis: FightAnalysis) -> QPolarChart:
        rows = analysis.comparison_rows()
        step = 360.0 / len(rows)

        chart = QPolarChart()
        chart.setTitle("Profile Radar")

        angular_axis = QCategoryAxis()
        angular_axis.setRange(0, 360)
        angular_axis.setLabelsPosition(QCategoryAxis.AxisLabelsPosition.AxisLabelsPositionOnValue)
        for idx, (label, _, _) in enumerate(rows):
            angular_axis.append(label, (idx + 1) * step)
        chart.addAxis(angular_axis, QPolarChart.PolarOrientation.PolarOrientationAngular)

        radial_axis = QValueAxis()
        radial_axis.setRange(MIN_STAT, MAX_STAT)
        chart.addAxis(radial_axis, QPolarChart.PolarOrientation.PolarOrientationRadial)

        for name, color, column in (("You", USER_COLOR, 1), ("Opponent", OPPONENT_COLOR, 2)):
            series = QLineSeries()
            series.setName(name)
            series.setColor(QColor(color))
            # 0 and 360 degrees coincide, so the last axis also closes the outline.
            series.append(0.0, _bar_value(rows[-1][column]))
            for idx, row in enumerate(rows):
                series.append((idx + 1) * step, _bar_value(row[column]))
            chart.addSeries(series)
            series.attachAxis(angular_axis)
            series.attachAxis(radial_axis)

        chart.legend().setVisible(True)
        chart.legend().setAlignment(Qt.AlignmentFlag.AlignBottom)
        return chart


def run_gui(argv: list[str] | None = None) -> int:
    app = QApplication(sys.argv if argv is None else argv)
    window = FightCordWindow()
    window.show()
    return app.exec()


def main() -> None:
    parser = argparse.ArgumentParser(description="FightCord desktop form.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args, qt_args = parser.parse_known_args()
    configure_logging(args.verbose)
    raise SystemExit(run_gui([sys.argv[0], *qt_args]))


if __name__ == "__main__":
    main()
