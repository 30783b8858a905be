#!/usr/bin/env python3
# main.py
from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import List, Optional

from .config import BAUD_RATE, LOG_DIR, SETTLE_DELAY, TIMEOUT
from .serial_reader import ReplayReader, TransportUnavailableError, open_serial_reader
from .session import DecoderSession

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                        datefmt="%Y-%m-%d %H:%M:%S")


def print_banner() -> None:
    print("========================================")
    print("   PRT-7 DECODER v1.0")
    print("========================================")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prt7-receiver",
                                     description="Decode hidden messages from a PRT-7 serial stream")
    parser.add_argument("--port", action="append", dest="ports", metavar="PORT",
                        help="Serial port to try (repeatable, default: probe the usual USB ports)")
    parser.add_argument("--baud", type=int, default=BAUD_RATE, help=f"Baud rate (default {BAUD_RATE})")
    parser.add_argument("--timeout", type=float, default=TIMEOUT, help="Read timeout in seconds")
    parser.add_argument("--replay", metavar="FILE",
                        help="Decode a captured line file instead of a serial port ('-' for stdin)")
    parser.add_argument("--log-dir", default=LOG_DIR, help="Directory for the CSV session log")
    parser.add_argument("--no-csv", action="store_true", help="Do not write the CSV session log")
    parser.add_argument("--plot", action="store_true", help="Show the live rotor plot")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    return parser


def build_observers(args: argparse.Namespace) -> list:
    observers = []
    try:
        if not args.no_csv:
            from .session_logger import SessionLogger
            observers.append(SessionLogger(args.log_dir))
        if args.plot:
            from .plotter import RotorPlotter
            observers.append(RotorPlotter())
    except Exception:
        for observer in observers:
            observer.close()
        raise
    return observers


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    print_banner()

    if args.replay:
        logger.info(f"Replaying captured frames from {args.replay}")
        if args.replay == "-":
            source = ReplayReader(sys.stdin, owns_source=False)
        else:
            try:
                capture = open(args.replay, encoding="utf-8")
            except OSError as e:
                logger.error(f"ERROR: {e}")
                return 1
            source = ReplayReader(capture)
    else:
        logger.info("Starting PRT-7 decoder. Connecting to serial port...")
        try:
            source = open_serial_reader(args.ports, baud=args.baud, timeout=args.timeout,
                                        settle_delay=SETTLE_DELAY)
        except TransportUnavailableError as e:
            logger.error(f"ERROR: {e}")
            return 1

    try:
        observers = build_observers(args)
    except Exception:
        source.close()
        raise

    logger.info("Waiting for frames...")
    session = DecoderSession()
    # SIGTERM stops the loop the same way Ctrl-C does, only while decoding
    previous_sigterm = signal.signal(signal.SIGTERM, signal.default_int_handler)
    try:
        message = session.run(source, observers)
    finally:
        if previous_sigterm is not None:
            signal.signal(signal.SIGTERM, previous_sigterm)
        for observer in observers:
            observer.close()

    print("---")
    print("Data stream finished.")
    print("HIDDEN MESSAGE ASSEMBLED:")
    print(message)
    print("---")
    return 0


if __name__ == '__main__':
    sys.exit(main())
