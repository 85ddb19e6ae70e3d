import argparse
import logging

from logicsim import demo


def main(args=None):
    parser = argparse.ArgumentParser(
        prog="logicsim", description="Run the half adder demonstration."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="level of the simulation engine logging (default: %(default)s)",
    )
    args = parser.parse_args(args)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    demo.run()


if __name__ == "__main__":
    main()
