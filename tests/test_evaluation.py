"""
Unit tests for run evaluation and visualization.
Tests history metrics and convergence plots.
"""

import os
import tempfile
import unittest

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

import helpers  # noqa: F401

from heuristics import SequentialSelector, Terminator
from heuristics.algorithms import VNSBuilder
from heuristics.evaluation.metrics import HISTORY_COLUMNS, history_to_frame, summarize_history
from heuristics.visualization.plotter import Plotter, plot_convergence
from examples.linesearch import NeighborsUpUntilN, numbers_from

NUMBERS = [9, 8, 7, 8, 9, 7, 5, 0]


def run_vns():
    vns = (VNSBuilder()
           .selector(SequentialSelector())
           .operator(NeighborsUpUntilN(NUMBERS, 1))
           .terminator(Terminator.builder().iterations(10))
           .seed(0)
           .build())
    vns.optimize(numbers_from(NUMBERS)[0])
    return vns


class TestMetrics(unittest.TestCase):
    """Test history metrics."""

    def setUp(self):
        self.vns = run_vns()

    def test_history_to_frame(self):
        """Test history conversion to DataFrame."""
        frame = history_to_frame(self.vns.history)
        self.assertEqual(len(frame), 10)
        self.assertEqual(frame.index.name, 'iteration')
        self.assertEqual(list(frame.columns), HISTORY_COLUMNS[1:])
        self.assertEqual(frame.loc[2, 'best_objective'], 7.0)
        self.assertTrue(frame['best_objective'].is_monotonic_decreasing)

    def test_summarize_history(self):
        """Test run summary values."""
        summary = summarize_history(self.vns.history, initial_objective=9.0)
        self.assertEqual(summary['iterations'], 10)
        self.assertEqual(summary['improvements'], 2)
        self.assertEqual(summary['accepted'], 2)
        self.assertEqual(summary['rejected'], 8)
        self.assertAlmostEqual(summary['acceptance_rate'], 0.2)
        self.assertEqual(summary['final_best'], 7.0)
        self.assertEqual(summary['last_improvement_iteration'], 2)
        self.assertEqual(summary['operator_usage'], {'0': 10})
        self.assertAlmostEqual(summary['relative_improvement'], 2.0 / 9.0)

    def test_summary_without_initial_objective(self):
        """Test summary without initial objective."""
        summary = summarize_history(self.vns.history)
        self.assertIsNone(summary['initial_objective'])
        self.assertIsNone(summary['relative_improvement'])

    def test_empty_history(self):
        """Test empty history."""
        summary = summarize_history([])
        self.assertEqual(summary['iterations'], 0)
        self.assertIsNone(summary['final_best'])
        self.assertEqual(summary['operator_usage'], {})

        frame = history_to_frame([])
        self.assertTrue(frame.empty)


class TestPlotter(unittest.TestCase):
    """Test convergence plots."""

    def setUp(self):
        self.data = run_vns().get_convergence_data()

    def tearDown(self):
        plt.close('all')

    def test_convergence_data_shape(self):
        """Test convergence data lengths."""
        self.assertEqual(len(self.data['iterations']), 10)
        for key in ('best_objective', 'incumbent_objective', 'candidate_objective', 'choices'):
            self.assertEqual(len(self.data[key]), 10)

    def test_plot_convergence(self):
        """Test convergence figure layout."""
        fig = Plotter().plot_convergence(self.data, title="VNS")
        self.assertEqual(len(fig.axes), 2)
        self.assertEqual(len(fig.axes[0].lines), 2)

    def test_plot_saved_only_with_path(self):
        """Test figure is written only with a path."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            save_path = os.path.join(tmp_dir, 'convergence.png')
            plot_convergence(self.data, save_path=save_path)
            self.assertTrue(os.path.exists(save_path))

            Plotter().plot_convergence(self.data)
            self.assertEqual(os.listdir(tmp_dir), ['convergence.png'])

    def test_custom_config(self):
        """Test custom plot configuration."""
        config = {
            'figure_size': (6, 4),
            'dpi': 72,
            'colors': ['#000000', '#FF0000'],
            'line_width': 1,
            'font_size': 8,
        }
        fig = Plotter(config).plot_convergence(self.data)
        width, height = fig.get_size_inches()
        self.assertEqual((width, height), (6.0, 4.0))


if __name__ == '__main__':
    unittest.main()
