"""
Test fish aging, hunger and reproduction eligibility
"""
from pond_sim.config import SimulationConfig
from pond_sim.core.fish import Carp, Pike, OLD_AGE, STARVATION


def make_pike(**kwargs):
    config = SimulationConfig()
    params = dict(age=0, max_age=config.PIKE_MAX_AGE,
                  reproduction_age=config.PIKE_REPRODUCTION_AGE,
                  max_hunger_time=config.PIKE_MAX_HUNGER_TIME)
    params.update(kwargs)
    return Pike(**params)


def test_age_boundary_is_exact():
    """A fish reaching max_age survives; passing it kills"""
    carp = Carp(age=9, max_age=10, reproduction_age=3)

    carp.age_one_tick()
    assert carp.age == 10
    assert carp.is_alive, "age == max_age is still alive"

    carp.age_one_tick()
    assert not carp.is_alive, "Carp should die once age exceeds max_age"
    assert carp.cause_of_death == OLD_AGE


def test_pike_starves_on_the_tick_hunger_reaches_limit():
    pike = make_pike(max_hunger_time=3)
    pike.hunger_time = 2
    assert not pike.is_hungry()

    pike.age_one_tick()

    assert pike.hunger_time == 3
    assert pike.is_hungry()
    assert not pike.is_alive
    assert pike.cause_of_death == STARVATION


def test_pike_ages_before_hunger_check():
    """Both checks run in one tick; the age check comes first"""
    pike = make_pike(age=20, max_age=20, max_hunger_time=3)
    pike.hunger_time = 2

    pike.age_one_tick()

    assert pike.age == 21
    assert pike.hunger_time == 3, "Hunger still grows after an age death"
    assert not pike.is_alive
    assert pike.cause_of_death == OLD_AGE


def test_eating_resets_hunger():
    pike = make_pike()
    pike.age_one_tick()
    pike.age_one_tick()
    assert pike.hunger_time == 2

    pike.eat()
    assert pike.hunger_time == 0

    pike.age_one_tick()
    assert pike.is_alive


def test_death_is_permanent():
    carp = Carp(age=0, max_age=10, reproduction_age=3)
    carp.die("eaten")
    carp.die(OLD_AGE)
    assert not carp.is_alive
    assert carp.cause_of_death == "eaten", "First cause of death should stick"


def test_can_reproduce_threshold():
    carp = Carp(age=2, max_age=10, reproduction_age=3)
    assert not carp.can_reproduce()
    carp.age_one_tick()
    assert carp.can_reproduce()


def test_species_flags_and_ids():
    pike = make_pike()
    carp = Carp(age=0, max_age=10, reproduction_age=3)
    assert pike.is_predator and pike.symbol == "P"
    assert not carp.is_predator and carp.symbol == "C"
    assert pike.id != carp.id


def test_move_sets_position_without_validation():
    carp = Carp(age=0, max_age=10, reproduction_age=3, position=(1, 1))
    carp.move((-5, 99))
    assert carp.position == (-5, 99)
