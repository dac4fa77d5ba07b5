# Main.py
""""" Entry point for the pow commandline exponent calculator.

   Responsibilities:
   - Make the PowCalc package importable when run from a source checkout
   - Hand the command line over to the CLI layer and exit with its status

"""""
import sys

from PowCalc import CLI


def main():

    """
    Keep this thin: no business logic here.
    """

    return CLI.main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
