"""
Entry point for running sincdelay as a module

Pushes a unit impulse through a delay line while alpha ramps linearly from
0 to 1, printing every sample.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

import argparse
import sys
from typing import Optional, Sequence

from sincdelay import __version__
from sincdelay.conversions import samples_to_ms
from sincdelay.errors import SincDelayError
from sincdelay.logger import LOG_LEVELS, set_global_logging
from sincdelay.sinc_interpolator import MultiTapSincInterpolator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sincdelay",
        description="Render the impulse response of a gliding multi-tap sinc delay line.",
    )
    parser.add_argument("-n", "--samples", type=int, default=1000,
                        help="number of samples to process (default: 1000)")
    parser.add_argument("-k", type=int, default=2,
                        help="auxiliary tap-pair count (default: 2, i.e. 6 taps)")
    parser.add_argument("--tau1", type=float, default=100.5,
                        help="initial delay in samples (default: 100.5)")
    parser.add_argument("--tau2", type=float, default=500.7,
                        help="final delay in samples (default: 500.7)")
    parser.add_argument("--max-delay", type=int, default=4096,
                        help="delay line capacity in samples (default: 4096)")
    parser.add_argument("--sample-rate", type=float, default=44100.0,
                        help="sample rate in Hz, for reporting only (default: 44100)")
    parser.add_argument("--log-level", default="INFO", type=str.upper,
                        choices=LOG_LEVELS,
                        help="logging level (default: INFO)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    logger = set_global_logging(level=args.log_level)
    logger.info(f"sincdelay v{__version__} starting...")

    if args.samples < 1:
        logger.error("--samples must be at least 1, got %d", args.samples)
        return 2

    try:
        line = MultiTapSincInterpolator(args.max_delay, args.k, args.sample_rate)
        line.set_delays(args.tau1, args.tau2)
    except SincDelayError as e:
        logger.error("%s", e)
        return 2

    logger.info(
        "gliding from %.2f ms to %.2f ms over %d samples with %d taps",
        float(samples_to_ms(args.tau1, args.sample_rate)),
        float(samples_to_ms(args.tau2, args.sample_rate)),
        args.samples,
        line.num_taps,
    )

    print(f"Processing {args.samples} samples...")
    last = max(args.samples - 1, 1)
    for i in range(args.samples):
        alpha = i / last
        line.set_interpolation(alpha)
        x = 1.0 if i == 0 else 0.0
        y = line.process_sample(x)
        print(f"Sample {i}: Input={x:g}, Output={y:g}, Alpha={alpha:g}")
    print("Processing finished.")

    logger.info("Application completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
