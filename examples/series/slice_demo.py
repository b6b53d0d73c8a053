from __future__ import annotations

import logging

import numpy as np

from plotseries import Formatted, slice_it


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    x = np.linspace(0.0, 2.0 * np.pi, 8)
    records = slice_it(
        Formatted(x, lambda v: f"{v:.2f} rad"),
        [np.sin, np.cos, [0.5, None, 0.25, np.inf, 0.0, 0.1, 0.2, 0.3]],
        fillrange=0,
        ribbon=(0.1, lambda v: 0.05 * v),
        label="trig",
    )
    for i, record in enumerate(records):
        lower, upper = record["ribbon"]
        print(f"series {i}: y={np.round(record['y'], 3).tolist()} ribbon_upper={np.round(upper, 3).tolist()}")

    surface = slice_it(None, None, np.outer(np.arange(3.0), np.arange(4.0)), seriestype="surface")
    print(f"surface: x={list(surface[0]['x'])} y={list(surface[0]['y'])} z={surface[0]['z'].shape}")


if __name__ == "__main__":
    main()
