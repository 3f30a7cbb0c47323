"""
Configuration settings for the pond simulation

This file contains all tunable parameters for the pike/carp pond.
Defaults reproduce the classic run: a 10x10 pond, 5 pikes, 20 carps, 20 ticks.
"""


class SimulationConfig:
    """Configuration class for all simulation parameters"""

    # Store base config values (populated after class definition)
    _BASE = {}

    # ============================================================================
    # GRID SETTINGS
    # ============================================================================
    GRID_WIDTH = 10  # Pond width in cells (x axis)
    GRID_HEIGHT = 10  # Pond height in cells (y axis, row 0 rendered first)

    # ============================================================================
    # POPULATION SETTINGS
    # ============================================================================
    INITIAL_PIKE_COUNT = 5  # Starting predators
    INITIAL_CARP_COUNT = 20  # Starting prey

    # ============================================================================
    # SPECIES PARAMETERS
    # ============================================================================
    PIKE_MAX_AGE = 20  # Pike dies once age exceeds this
    PIKE_REPRODUCTION_AGE = 5  # Age at which a pike counts as mature
    PIKE_MAX_HUNGER_TIME = 3  # Ticks without a meal before a pike starves

    CARP_MAX_AGE = 10  # Carp dies once age exceeds this
    CARP_REPRODUCTION_AGE = 3  # Age at which a carp counts as mature

    # ============================================================================
    # RUN SETTINGS
    # ============================================================================
    NUM_TICKS = 20  # Ticks per run
    TICK_DELAY = 0.5  # Seconds to pause between frames
    CLEAR_SCREEN = True  # Clear the terminal before each frame
    RANDOM_SEED = None  # None = fresh entropy each run
    STATS_LOG_INTERVAL = 5  # Log a population line every N ticks (0 = never)

    # ============================================================================
    # SAMPLING
    # ============================================================================
    # Rejection-sampling draws before falling back to enumerating free cells.
    # Keeps free-cell lookup exact and finite on a nearly full pond.
    FREE_CELL_MAX_ATTEMPTS = 1000

    @classmethod
    def overrides(cls, **kwargs) -> "SimulationConfig":
        """Return a config instance with the given keys overridden.

        Keys are case-insensitive; ``None`` values keep the default.
        """
        config = cls()
        for key, value in kwargs.items():
            name = key.upper()
            if name not in cls._BASE:
                raise AttributeError(f"Unknown config key: {key}")
            if value is not None:
                setattr(config, name, value)
        return config

    def summary(self) -> str:
        """Human-readable block of the active settings."""
        info = f"{'=' * 50}\n"
        info += f"Pond: {self.GRID_WIDTH}x{self.GRID_HEIGHT}, ticks: {self.NUM_TICKS}\n"
        info += f"Pikes: {self.INITIAL_PIKE_COUNT} (max age {self.PIKE_MAX_AGE}, "
        info += f"max hunger {self.PIKE_MAX_HUNGER_TIME})\n"
        info += f"Carps: {self.INITIAL_CARP_COUNT} (max age {self.CARP_MAX_AGE})\n"
        info += f"Seed: {self.RANDOM_SEED}\n"
        info += f"{'=' * 50}"
        return info


# Populate _BASE with all uppercase class attributes (base config values)
SimulationConfig._BASE = {k: v for k, v in vars(SimulationConfig).items() if k.isupper()}
