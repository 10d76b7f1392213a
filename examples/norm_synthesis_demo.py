"""
Example: Tracking a Small Norm Generalisation Network

This example builds a two-level network of traffic norms, activates the
general norm, feeds fitness observations into per-norm sliding windows and
prints the control lists a synthesis loop would read each tick.
"""

import logging

import numpy as np

from norm_network import (
    AgentAction,
    FitnessTracker,
    GeneralisationNetwork,
    LoggerConfig,
    Norm,
    NormModality,
    NodeState,
    WindowConfig,
    setup_logging,
)


def main():
    setup_logging(LoggerConfig(level=logging.INFO))

    go = AgentAction("Go")
    left = Norm(NormModality.PROHIBITION, go, "front(car) & left(car)")
    right = Norm(NormModality.PROHIBITION, go, "front(car) & right(car)")
    general = Norm(NormModality.PROHIBITION, go, "front(car)")

    network = GeneralisationNetwork()
    for norm in (left, right, general):
        network.add(norm)
    network.add_generalisation(left, general)
    network.add_generalisation(right, general)

    print("=" * 60)
    print("Norm Network - Generalisation Demo")
    print("=" * 60)
    print(f"Top boundary: {[str(n) for n in network.get_top_boundary()]}")
    print(f"Brothers of {left}: {[str(n) for n in network.get_brothers(left)]}")

    network.set_state(general, NodeState.ACTIVE)
    print(f"Active:          {[str(n) for n in network.get_active_nodes()]}")
    print(f"Represented:     {[str(n) for n in network.get_represented_nodes()]}")
    print(f"Not represented: {[str(n) for n in network.get_not_represented_nodes()]}")

    tracker = FitnessTracker(WindowConfig(size=10))
    rng = np.random.default_rng(0)
    for tick in range(30):
        for norm in network.get_active_nodes():
            tracker.observe(norm, rng.normal(0.8, 0.1))

    for norm in tracker.get_nodes_with_new_values():
        window = tracker.get_window(norm)
        print(f"\n{norm}")
        print(f"  average: {window.get_current_average():.4f}")
        print(f"  range:   [{window.get_current_bottom_boundary():.4f}, "
              f"{window.get_current_top_boundary():.4f}]")
    tracker.clear_new_values()

    print("\nSummary:", network.get_summary())


if __name__ == "__main__":
    main()
