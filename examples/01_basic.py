"""
Basic usage - Encode and decode a string
"""
from encodex import TranslationUnit, Settings, Base


def main():
    # Encode (Base64 is the default)
    unit = TranslationUnit("みま".encode("utf-8"), Settings.for_encoding())
    encoded = unit.translate()
    print(f"Encoded: {encoded.decode('ascii')}")

    # Decode with the URL-safe alphabet
    unit = TranslationUnit(b"44G_44G-", Settings.for_decoding(Base.BASE64URL))
    print(f"Decoded: {unit.translate().decode('utf-8')}")


if __name__ == "__main__":
    main()
