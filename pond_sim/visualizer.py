"""
Pond visualizer for the pond simulation
Optional matplotlib window that mirrors the console frames
"""

from typing import Dict

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.colors import ListedColormap
import numpy as np

from pond_sim.core.pond import CODE_EMPTY, CODE_PIKE

# Indexed by occupancy code: empty, carp, pike
POND_COLORS = ListedColormap(['#1f4e79', '#f2c14e', '#c0392b'])


class PondVisualizer:
    """Pond occupancy image, population chart and live statistics"""

    def __init__(self, config, interactive: bool = True):
        self.config = config
        self.interactive = interactive
        self.fig = plt.figure(figsize=(12, 6))
        self.fig.suptitle('Pond - Pike and Carp', fontsize=14, fontweight='bold')

        gs = self.fig.add_gridspec(2, 2, hspace=0.3, wspace=0.25,
                                   left=0.05, right=0.95, top=0.9, bottom=0.08)

        # Pond field (left side) - spans both rows
        self.ax_pond = self.fig.add_subplot(gs[:, 0])
        self.pond_image = self.ax_pond.imshow(
            np.zeros((config.GRID_HEIGHT, config.GRID_WIDTH), dtype=np.int8),
            cmap=POND_COLORS, vmin=CODE_EMPTY, vmax=CODE_PIKE, interpolation='nearest')
        self.ax_pond.set_xticks([])
        self.ax_pond.set_yticks([])
        self._create_legend()

        # Population graph (top right)
        self.ax_pop = self.fig.add_subplot(gs[0, 1])

        # Live statistics panel (bottom right)
        self.ax_stats = self.fig.add_subplot(gs[1, 1])
        self.ax_stats.axis('off')

        if self.interactive:
            plt.ion()
            plt.show()

    def _create_legend(self):
        legend_elements = [
            mpatches.Patch(facecolor=POND_COLORS(2), edgecolor='white', label='Pike'),
            mpatches.Patch(facecolor=POND_COLORS(1), edgecolor='white', label='Carp'),
        ]
        self.ax_pond.legend(handles=legend_elements, loc='upper center',
                            bbox_to_anchor=(0.5, -0.01), ncol=2, fontsize=8, frameon=False)

    def update(self, simulation):
        """Redraw every panel from the simulation state"""
        self.pond_image.set_data(simulation.pond.occupancy())
        self.ax_pond.set_title(
            f'TICK: {simulation.tick} | PIKES: {len(simulation.pikes)} | CARPS: {len(simulation.carps)}',
            fontsize=10, fontweight='bold')

        history = simulation.stats['history']
        ticks = list(range(len(history['pikes'])))
        self.ax_pop.clear()
        self.ax_pop.set_title('Population Over Time', fontsize=9, fontweight='bold', pad=3)
        self.ax_pop.set_xlabel('Tick', fontsize=7)
        self.ax_pop.set_ylabel('Count', fontsize=7)
        self.ax_pop.tick_params(labelsize=6)
        self.ax_pop.grid(True, alpha=0.3)
        self.ax_pop.plot(ticks, history['carps'], color='#f2c14e', linewidth=1.5, label='Carps')
        self.ax_pop.plot(ticks, history['pikes'], color='#c0392b', linewidth=1.5, label='Pikes')
        self.ax_pop.legend(loc='upper right', fontsize=6)

        self._update_stats(simulation.stats)

        if self.interactive:
            plt.pause(0.0001)
        else:
            self.fig.canvas.draw()

    def _update_stats(self, stats: Dict):
        self.ax_stats.clear()
        self.ax_stats.axis('off')
        stats_text = f"""EVENTS
==================
Meals: {stats['total_meals']}
Old age deaths: {stats['deaths_old_age']}
Starvations: {stats['deaths_starvation']}

POPULATION
  Peak pikes: {stats['peak_pikes']}
  Peak carps: {stats['peak_carps']}
  Mature pikes: {stats['mature_pikes']}
  Mature carps: {stats['mature_carps']}
"""
        self.ax_stats.text(0.05, 0.95, stats_text, transform=self.ax_stats.transAxes,
                           fontsize=8, verticalalignment='top', fontfamily='monospace',
                           bbox=dict(boxstyle='round', facecolor='wheat', alpha=0.5))

    def close(self):
        plt.close(self.fig)
