from .line_chart_view import LineChartView
from .bar_chart_view import BarChartView
from .pie_chart_view import PieChartView

__all__ = ["LineChartView", "BarChartView", "PieChartView"]
