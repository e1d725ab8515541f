"""
Encoding and decoding single values.
"""
from siunit import Quantity, UnitError, decode, encode


def main():
    f = 1500.0
    v = -0.0034

    print("f =", encode("Hz", f))
    print("v =", encode("V", v))
    print("v =", encode("V", v, precision=4))

    print("f =", decode("Hz", "100.2 KHz"), "Hz")

    for text in ["10.2 dBmV", "5 XV", "abc V"]:
        try:
            decode("V", text)
        except UnitError as err:
            print(f"{text!r}: {err}")

    q = Quantity.parse("F", "4.7 nF")
    print(f"C = {q} ({float(q)} F)")


if __name__ == "__main__":
    main()
