#!/usr/bin/env python3
"""
Example 01: Per-Profile Options
===============================

Demonstrates how to set up one Options record per atmospheric profile
before a radiative transfer model call.

Features:
- Allocate per-channel emissivity for every profile at once
- Switch the user emissivity on for some profiles only
- Validate each record before use
- Compare records and save them to a YAML file

Usage:
    python 01_profile_options.py
    python 01_profile_options.py --n-channels 20 --output options.yaml
"""

import argparse

import numpy as np

from rt_options import Options, associated, create, destroy, equal
from rt_options.config import save_options


def parse_args():
    parser = argparse.ArgumentParser(
        description="Per-profile Options demonstration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--n-profiles", type=int, default=2,
        help="Number of atmospheric profiles"
    )
    parser.add_argument(
        "--n-channels", type=int, default=19,
        help="Number of sensor channels"
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help="Save the options to a JSON or YAML file"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    print("=" * 70)
    print("PER-PROFILE OPTIONS")
    print("=" * 70)

    profiles = [Options() for _ in range(args.n_profiles)]
    create(profiles, args.n_channels)
    print(f"\nAllocated: {associated(profiles)}")

    # Ocean-like emissivity rising slowly with channel number
    emissivity = np.linspace(0.80, 0.95, args.n_channels)
    for m, record in enumerate(profiles):
        record.emissivity = emissivity
        record.use_emissivity = (m % 2 == 0)

    # Aircraft flight level for the last profile
    profiles[-1].aircraft_pressure = 250.0

    print("\nValidation:")
    for m, record in enumerate(profiles):
        status = "OK" if record.is_valid() else "INVALID"
        print(f"  Profile {m}: {status} "
              f"(use_emissivity={record.use_emissivity}, "
              f"aircraft_mode={record.aircraft_mode})")

    # A bad value is caught before the model is called
    bad = profiles[0].copy()
    bad.emissivity[0] = 1.2
    print(f"\nProfile 0 with emissivity 1.2 valid: {bad.is_valid()}")
    print(f"Equal to original profile 0: {equal(bad, profiles[0])}")

    print("\nProfile 0 contents:")
    profiles[0].inspect()

    if args.output:
        save_options(profiles, args.output)
        print(f"\nOptions saved to: {args.output}")

    destroy(profiles)
    print(f"\nAfter destroy: {associated(profiles)}")


if __name__ == "__main__":
    main()
