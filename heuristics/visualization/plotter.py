"""
Plotting utilities for heuristic runs.
Creates convergence plots and operator usage charts.
"""

from collections import Counter
from typing import Dict, Optional

import matplotlib.pyplot as plt
import seaborn as sns

from heuristics.config import VIZ_CONFIG


class Plotter:
    """Creates plots for heuristic run analysis."""

    def __init__(self, config: Optional[Dict] = None):
        """
        Initialize plotter.

        Args:
            config: Visualization configuration
        """
        self.config = config or VIZ_CONFIG.copy()

        plt.style.use('default')
        sns.set_palette(self.config['colors'])

        self.fig_size = self.config['figure_size']
        self.dpi = self.config['dpi']
        self.font_size = self.config['font_size']
        self.line_width = self.config['line_width']

    def plot_convergence(self, convergence_data: Dict,
                         title: str = "Heuristic Convergence",
                         save_path: Optional[str] = None) -> plt.Figure:
        """
        Plot best and incumbent objectives over iterations.

        Args:
            convergence_data: Output of ``ImprovingHeuristic.get_convergence_data``
            title: Plot title
            save_path: Optional path to save plot

        Returns:
            Matplotlib figure
        """
        iterations = convergence_data['iterations']
        best = convergence_data['best_objective']
        incumbent = convergence_data['incumbent_objective']
        choices = convergence_data.get('choices', [])

        fig, axes = plt.subplots(1, 2, figsize=self.fig_size)

        # Objective plot
        axes[0].plot(iterations, incumbent, linewidth=self.line_width * 0.5,
                     alpha=0.6, label='Incumbent')
        axes[0].plot(iterations, best, linewidth=self.line_width, label='Best')
        axes[0].set_xlabel('Iteration', fontsize=self.font_size)
        axes[0].set_ylabel('Objective', fontsize=self.font_size)
        axes[0].set_title('Objective Evolution', fontsize=self.font_size)
        axes[0].grid(True, alpha=0.3)
        axes[0].legend()

        # Operator usage plot
        if choices:
            usage = Counter(str(choice) for choice in choices)
            labels = sorted(usage)
            axes[1].bar(labels, [usage[label] for label in labels])
        axes[1].set_xlabel('Operator choice', fontsize=self.font_size)
        axes[1].set_ylabel('Rounds', fontsize=self.font_size)
        axes[1].set_title('Operator Usage', fontsize=self.font_size)
        axes[1].grid(True, axis='y', alpha=0.3)

        fig.suptitle(title, fontsize=self.font_size + 2, fontweight='bold')
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=self.dpi, bbox_inches='tight')

        return fig


def plot_convergence(convergence_data: Dict, title: str = "Heuristic Convergence",
                     save_path: Optional[str] = None) -> plt.Figure:
    """
    Convenience function to plot convergence.

    Args:
        convergence_data: Dictionary with convergence data
        title: Plot title
        save_path: Optional path to save plot

    Returns:
        Matplotlib figure
    """
    plotter = Plotter()
    return plotter.plot_convergence(convergence_data, title, save_path)
