"""
Simulation engine for the pond
Handles the per-tick phases (carps, pikes, cull) and the console run loop
"""

import logging
import time
from typing import Dict, List, Optional, Tuple

import numpy as np

from pond_sim.config import SimulationConfig
from pond_sim.core.fish import Carp, Fish, Pike, EATEN, OLD_AGE, STARVATION
from pond_sim.core.pond import GridFullError, Pond

logger = logging.getLogger(__name__)

CLEAR_SEQUENCE = "\033[2J\033[H"


def create_population(pond: Pond, config) -> Tuple[List[Pike], List[Carp]]:
    """Create the initial pikes and carps on random free cells"""
    requested = config.INITIAL_PIKE_COUNT + config.INITIAL_CARP_COUNT
    capacity = pond.width * pond.height
    if requested > capacity:
        raise GridFullError(
            f"Cannot place {requested} fish in a pond of {capacity} cells")

    pikes = []
    for _ in range(config.INITIAL_PIKE_COUNT):
        x, y = pond.get_random_free_position()
        pike = Pike(0, config.PIKE_MAX_AGE, config.PIKE_REPRODUCTION_AGE,
                    config.PIKE_MAX_HUNGER_TIME, (x, y))
        pond.place_fish(pike, x, y)
        pikes.append(pike)

    carps = []
    for _ in range(config.INITIAL_CARP_COUNT):
        x, y = pond.get_random_free_position()
        carp = Carp(0, config.CARP_MAX_AGE, config.CARP_REPRODUCTION_AGE, (x, y))
        pond.place_fish(carp, x, y)
        carps.append(carp)

    return pikes, carps


class PredatorPreySimulation:
    """Owns the pond and both rosters; advances the world one tick at a time"""

    def __init__(self, config=None, rng: Optional[np.random.Generator] = None,
                 populate: bool = True) -> None:
        self.config = config if config is not None else SimulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.RANDOM_SEED)
        self.pond = Pond(self.config.GRID_WIDTH, self.config.GRID_HEIGHT,
                         rng=self.rng, max_attempts=self.config.FREE_CELL_MAX_ATTEMPTS)
        self.pikes: List[Pike] = []
        self.carps: List[Carp] = []
        self.tick = 0

        if populate:
            self.pikes, self.carps = create_population(self.pond, self.config)

        self.stats = {
            'ticks': 0,
            'total_meals': 0,
            'deaths_old_age': 0,
            'deaths_starvation': 0,
            'peak_pikes': len(self.pikes),
            'peak_carps': len(self.carps),
            'min_carps': len(self.carps),
            'mature_pikes': 0,
            'mature_carps': 0,
            'history': {'pikes': [len(self.pikes)], 'carps': [len(self.carps)]},
        }

    def add_fish(self, fish: Fish, x: int, y: int) -> None:
        """Place a fish and enlist it in its roster (scenario setup)"""
        self.pond.place_fish(fish, x, y)
        if isinstance(fish, Pike):
            self.pikes.append(fish)
        else:
            self.carps.append(fish)
        self._track_population()

    def simulate_tick(self) -> None:
        """Run one tick: carp phase, pike phase, cull phase"""
        self.move_carps()
        self.feed_pikes()
        self.cull_dead()

        self.tick += 1
        self.stats['ticks'] = self.tick
        self.stats['history']['pikes'].append(len(self.pikes))
        self.stats['history']['carps'].append(len(self.carps))
        self._track_population()

        interval = self.config.STATS_LOG_INTERVAL
        if interval and self.tick % interval == 0:
            logger.info("Tick %4d: Pikes=%3d, Carps=%3d, Meals=%3d",
                        self.tick, len(self.pikes), len(self.carps), self.stats['total_meals'])

    # === CARP PHASE ===
    def move_carps(self) -> None:
        for carp in self.carps:
            if not carp.is_alive:
                continue
            x, y = self.pond.get_random_free_position()
            self.pond.move_fish(carp, x, y)
            carp.age_one_tick()

    # === PIKE PHASE ===
    def feed_pikes(self) -> None:
        for pike in self.pikes:
            if not pike.is_alive:
                continue
            if not self.hunt(pike):
                x, y = self.pond.get_random_free_position()
                self.pond.move_fish(pike, x, y)
            pike.age_one_tick()

    def hunt(self, pike: Pike) -> bool:
        """Eat the first live carp next to the pike. Returns True on a meal."""
        for x, y in self.pond.get_adjacent_positions(*pike.position):
            prey = self.pond.get_fish_at(x, y)
            if isinstance(prey, Carp) and prey.is_alive:
                self.pond.remove_fish(x, y)
                prey.die(EATEN)
                pike.eat()
                self.stats['total_meals'] += 1
                logger.debug("Pike %d at %s ate carp %d at %s",
                             pike.id, pike.position, prey.id, (x, y))
                return True
        return False

    # === CULL PHASE ===
    def cull_dead(self) -> None:
        for fish in self.pikes + self.carps:
            if fish.is_alive:
                continue
            # Eaten carps were already lifted off the grid
            if self.pond.get_fish_at(*fish.position) is fish:
                self.pond.remove_fish(*fish.position)
            if fish.cause_of_death == OLD_AGE:
                self.stats['deaths_old_age'] += 1
            elif fish.cause_of_death == STARVATION:
                self.stats['deaths_starvation'] += 1
            logger.debug("Culled %r", fish)

        self.pikes = [p for p in self.pikes if p.is_alive]
        self.carps = [c for c in self.carps if c.is_alive]

    def _track_population(self) -> None:
        self.stats['peak_pikes'] = max(self.stats['peak_pikes'], len(self.pikes))
        self.stats['peak_carps'] = max(self.stats['peak_carps'], len(self.carps))
        self.stats['min_carps'] = min(self.stats['min_carps'], len(self.carps))
        self.stats['mature_pikes'] = sum(1 for p in self.pikes if p.can_reproduce())
        self.stats['mature_carps'] = sum(1 for c in self.carps if c.can_reproduce())

    def display_pond(self) -> None:
        self.pond.display()


def run_simulation(simulation: PredatorPreySimulation, ticks: Optional[int] = None,
                   delay: Optional[float] = None, clear: Optional[bool] = None,
                   visualizer=None) -> Dict:
    """Run the console loop: clear, label, draw, simulate, pause

    Returns:
        The simulation stats plus final counts and wall-clock duration
    """
    config = simulation.config
    ticks = config.NUM_TICKS if ticks is None else ticks
    delay = config.TICK_DELAY if delay is None else delay
    clear = config.CLEAR_SCREEN if clear is None else clear

    start_time = time.time()
    logger.info("Starting run: %d ticks, %d pikes, %d carps",
                ticks, len(simulation.pikes), len(simulation.carps))

    for tick in range(ticks):
        if clear:
            print(CLEAR_SEQUENCE, end="")
        print(f"Tick {tick + 1}:")
        simulation.display_pond()
        simulation.simulate_tick()
        if visualizer is not None:
            visualizer.update(simulation)
        if delay > 0:
            time.sleep(delay)

    print("Simulation ended.")

    stats = dict(simulation.stats)
    stats['final_pikes'] = len(simulation.pikes)
    stats['final_carps'] = len(simulation.carps)
    stats['duration'] = time.time() - start_time
    logger.info("Run finished: Pikes=%d, Carps=%d, Meals=%d, Duration=%.2fs",
                stats['final_pikes'], stats['final_carps'],
                stats['total_meals'], stats['duration'])
    return stats
