"""
Graph Generator for ChainCalc
Creates visualizations of the calculation history
"""
import io
import math

import matplotlib
matplotlib.use('Agg')  # Headless backend, figures are served as images
from matplotlib.figure import Figure

import config
from formatting import format_expression


class GraphGenerator:
    def __init__(self, history):
        self.history = history

    def _create_fig(self, figsize=None):
        """Internal helper to create a figure with optional custom size"""
        if figsize is None:
            figsize = config.GRAPH_FIGSIZE
        return Figure(figsize=figsize, dpi=config.GRAPH_DPI)

    def get_results_data(self, limit=config.MAX_HISTORY_ITEMS):
        """Labels and values of the stored results, oldest first"""
        calculations = self.history.load(limit)
        return {
            'labels': [format_expression(c.expression) for c in calculations],
            'values': [c.result for c in calculations],
            'timestamps': [c.timestamp.strftime("%Y-%m-%d %H:%M:%S") for c in calculations],
        }

    def create_results_graph(self, figsize=None, limit=config.MAX_HISTORY_ITEMS):
        """Create a line graph of calculation results in the order they were made"""
        data = self.get_results_data(limit)

        fig = self._create_fig(figsize)
        ax = fig.add_subplot(111)

        if not data['values']:
            ax.text(0.5, 0.5, 'No calculations yet', ha='center', va='center',
                    transform=ax.transAxes)
            ax.set_axis_off()
            return fig

        x = range(1, len(data['values']) + 1)
        # inf and nan results leave a gap in the line
        values = [v if math.isfinite(v) else math.nan for v in data['values']]
        ax.plot(x, values, marker='o', color='#2E8B57', linewidth=2)

        ax.set_xlabel('Calculation #')
        ax.set_ylabel('Result')
        ax.set_title('Calculation Results')
        ax.grid(True, alpha=0.3)

        fig.tight_layout()
        return fig

    @staticmethod
    def render_png(fig):
        """Render a figure to PNG bytes"""
        buffer = io.BytesIO()
        fig.savefig(buffer, format='png')
        return buffer.getvalue()
