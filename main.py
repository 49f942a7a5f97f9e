# main.py
import argparse

from config import AppConfig
from emwa.log import configure_logging
from runners.run_regular import main as regular
from runners.run_irregular import main as irregular

def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(description="EMWA over regular and irregular series")
    p.add_argument("mode", choices=["regular", "irregular", "both"], nargs="?", default="both")
    p.add_argument("--points", type=int, default=d.points)
    p.add_argument("--alpha-regular", type=float, default=d.alpha_regular)
    p.add_argument("--alpha-irregular", type=float, default=d.alpha_irregular)
    p.add_argument("--clock-start", type=float, default=d.clock_start)
    p.add_argument("--clock-step", type=float, default=d.clock_step)
    p.add_argument("--skip-stale", action="store_true")
    p.add_argument("--trace", dest="trace_path", default=d.trace_path)
    p.add_argument("--trace-every", type=int, default=d.trace_every)
    p.add_argument("--log-file", dest="log_path", default=d.log_path)
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig().with_(
        points=args.points,
        alpha_regular=args.alpha_regular,
        alpha_irregular=args.alpha_irregular,
        clock_start=args.clock_start,
        clock_step=args.clock_step,
        skip_stale=args.skip_stale,
        trace_path=args.trace_path,
        trace_every=args.trace_every,
        log_path=args.log_path,
        verbose=args.verbose,
    )

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    configure_logging(verbose=cfg.verbose, log_path=cfg.log_path)
    if args.mode in ("regular", "both"):
        regular(cfg)
    if args.mode in ("irregular", "both"):
        irregular(cfg)

if __name__ == "__main__":
    main()
