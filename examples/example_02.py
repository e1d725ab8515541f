"""
Printing a column of measured currents with one shared prefix.
"""
import numpy as np

from siunit import decode_array, encode_array


def main() -> None:
    # Damped sine sampled at 1 kHz
    t = np.arange(0.0, 0.01, 1e-3)
    i = 0.25 * np.exp(-200.0 * t) * np.sin(2.0 * np.pi * 150.0 * t)

    t_col = encode_array("s", t)
    i_col = encode_array("A", i, shared_prefix=True)
    for t_txt, i_txt in zip(t_col, i_col):
        print(f"{t_txt:>10}  {i_txt:>12}")

    i_back = decode_array("A", i_col)
    print(f"max error: {np.max(np.abs(i_back - i)):.3g} A")


if __name__ == "__main__":
    main()
