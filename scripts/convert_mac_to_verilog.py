"""
Simple script to convert the MAC module to Verilog using MyHDL.
"""

import argparse

from moore_mac.hdl.sim import convert_mac
from moore_mac.utils.int_defs import SignedFormat


def convert_mac_to_verilog():
    """Convert the MAC module to Verilog."""
    parser = argparse.ArgumentParser(description="Convert the MAC to Verilog")
    parser.add_argument("--width", type=int, default=9, help="Operand/accumulator width")
    parser.add_argument("--path", default="gen/verilog", help="Output directory")
    args = parser.parse_args()

    generated = convert_mac(args.path, SignedFormat(args.width))

    print(f"Verilog code generated: {generated}")


if __name__ == "__main__":
    convert_mac_to_verilog()
