"""Demonstration of the configuration singleton shared by two threads."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Sequence

from patternlab.config_manager import CONFIG_PATH, ConfigError, ConfigManager, get_instance

_print_lock = threading.Lock()


def _report(name: str, config: ConfigManager) -> None:
    with _print_lock:
        sys.stderr.write(f"{name}\n----\n")
        sys.stderr.write(config.describe())
        sys.stderr.write("----\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the shared configuration and print it from two threads."""
    parser = argparse.ArgumentParser(description="Print the shared configuration from two threads.")
    parser.add_argument("config", nargs="?", default=CONFIG_PATH, help="path of the JSON config file")
    args = parser.parse_args(argv)

    try:
        configs = [get_instance(args.config), get_instance(args.config)]
    except ConfigError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    threads = [
        threading.Thread(target=_report, args=(f"Thread {number}", config))
        for number, config in enumerate(configs, start=1)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())