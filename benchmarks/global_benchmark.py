"""Time checked against unchecked grid access for the configured workloads."""

import random
import timeit

from configurations import configurations

from fastmap import Grid
from fastmap.fastmap_logging import INFO, create_module_logger, log_to_stderr

_logger = create_module_logger("benchmarks")


def random_access(grid, coordinates, checked=True):
    """Write then read every coordinate in order."""
    if checked:
        for i, (x, y) in enumerate(coordinates):
            grid.set(x, y, i)
            grid.get(x, y)
    else:
        for i, (x, y) in enumerate(coordinates):
            grid.set_unchecked(x, y, i)
            grid.get_unchecked(x, y)


def full_sweep(grid, coordinates, checked=True):
    """Visit every cell row by row."""
    width, height = grid.width, grid.height
    if checked:
        for y in range(height):
            for x in range(width):
                grid.set(x, y, x)
    else:
        for y in range(height):
            for x in range(width):
                grid.set_unchecked(x, y, x)


workloads = {"random_access": random_access, "full_sweep": full_sweep}


def run_experiments(name, config):
    """Return the best timings for checked and unchecked access."""
    workload = workloads[name]
    params = config["parameters"]
    results = {True: [], False: []}

    for seed in range(config["seeds"]):
        rng = random.Random(seed)
        coordinates = [
            (rng.randrange(params["width"]), rng.randrange(params["height"]))
            for _ in range(config["operations"] or 0)
        ]
        for checked in (True, False):
            grid = Grid(params["width"], params["height"])
            times = timeit.repeat(
                lambda grid=grid, checked=checked: workload(
                    grid, coordinates, checked=checked
                ),
                number=1,
                repeat=config["replications"],
            )
            results[checked].append(min(times))

    return min(results[True]), min(results[False])


if __name__ == "__main__":
    log_to_stderr(INFO)
    print(f"{'workload':<15}{'size':<8}{'checked (s)':>14}{'unchecked (s)':>16}")
    for name, sizes in configurations.items():
        for size, config in sizes.items():
            _logger.info(f"running {name} ({size})")
            checked, unchecked = run_experiments(name, config)
            print(f"{name:<15}{size:<8}{checked:>14.4f}{unchecked:>16.4f}")
