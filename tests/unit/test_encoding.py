import pytest

from dek_registry import KeyMaterialDecodeError, b64decode, b64encode


def test_b64encode_uses_padded_standard_alphabet() -> None:
    assert b64encode(b"fo") == "Zm8="
    assert b64encode(b"\xfb\xff") == "+/8="


def test_b64decode_tolerates_missing_padding() -> None:
    assert b64decode("Zm8") == b"fo"
    assert b64decode("Zm8=") == b"fo"


def test_b64decode_rejects_urlsafe_alphabet() -> None:
    with pytest.raises(KeyMaterialDecodeError):
        b64decode("-_8=")


def test_b64decode_wraps_unexpected_failures() -> None:
    with pytest.raises(KeyMaterialDecodeError) as excinfo:
        b64decode(1234)  # type: ignore[arg-type]
    assert str(excinfo.value).startswith("Unknown error:")
    assert isinstance(excinfo.value.__cause__, TypeError)
