import pytest
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from dek_registry import Dek, DekAlgorithm, KeyMaterialDecodeError, MockDekRegistryClient, NotFoundError


def test_encrypted_material_absent_returns_none(client: MockDekRegistryClient) -> None:
    dek = client.register_dek("kek1", "sub1", "AES256_GCM")
    assert client.get_dek_encrypted_key_material_bytes(dek) is None
    assert client.get_dek_key_material_bytes(dek) is None


def test_encrypted_material_is_memoized(client: MockDekRegistryClient) -> None:
    dek = client.register_dek("kek1", "sub1", "AES256_GCM", 1, "Zm9v")
    first = client.get_dek_encrypted_key_material_bytes(dek)
    dek.encrypted_key_material = "YmFy"
    second = client.get_dek_encrypted_key_material_bytes(dek)
    assert first == b"foo"
    assert second is first


def test_key_material_is_memoized() -> None:
    client = MockDekRegistryClient()
    dek = Dek(kek_name="kek1", subject="sub1", algorithm="AES256_GCM", key_material="Zm9v")
    assert client.get_dek_key_material_bytes(dek) == b"foo"
    dek.key_material = "YmFy"
    assert client.get_dek_key_material_bytes(dek) == b"foo"


def test_set_key_material_round_trip(client: MockDekRegistryClient) -> None:
    raw = AESGCM.generate_key(bit_length=DekAlgorithm.AES256_GCM.key_size * 8)
    assert len(raw) == DekAlgorithm.AES256_GCM.key_size
    dek = client.register_dek("kek1", "sub1", "AES256_GCM")
    client.set_dek_key_material(dek, raw)
    assert dek.key_material is not None
    assert client.get_dek_key_material_bytes(dek) == raw
    assert client.get_dek("kek1", "sub1", "AES256_GCM").key_material == dek.key_material


@pytest.mark.parametrize("empty", [b"", None])
def test_set_key_material_empty_is_noop(client: MockDekRegistryClient, empty) -> None:
    dek = client.register_dek("kek1", "sub1", "AES256_GCM")
    client.set_dek_key_material(dek, empty)
    assert dek.key_material is None


@pytest.mark.parametrize("bad", ["not*base64", "A", "@@@@", "Zm9vé"])
def test_malformed_encrypted_material_raises_decode_error(client: MockDekRegistryClient, bad: str) -> None:
    dek = client.register_dek("kek1", "sub1", "AES256_GCM", 1, bad)
    with pytest.raises(KeyMaterialDecodeError) as excinfo:
        client.get_dek_encrypted_key_material_bytes(dek)
    assert not isinstance(excinfo.value, NotFoundError)
    assert str(excinfo.value).startswith("Failed to decode base64 string:")
    assert dek.encrypted_key_material_bytes is None


def test_malformed_key_material_raises_decode_error() -> None:
    dek = Dek(kek_name="kek1", subject="sub1", algorithm="AES256_GCM", key_material="@@@@")
    with pytest.raises(KeyMaterialDecodeError):
        MockDekRegistryClient().get_dek_key_material_bytes(dek)


def test_set_key_material_keeps_previously_decoded_bytes(client: MockDekRegistryClient) -> None:
    first = AESGCM.generate_key(bit_length=DekAlgorithm.AES128_GCM.key_size * 8)
    second = AESGCM.generate_key(bit_length=DekAlgorithm.AES128_GCM.key_size * 8)
    dek = client.register_dek("kek1", "sub1", DekAlgorithm.AES128_GCM)
    client.set_dek_key_material(dek, first)
    assert client.get_dek_key_material_bytes(dek) == first

    client.set_dek_key_material(dek, second)
    # The text is replaced but the decoded bytes are memoized from the first read.
    assert dek.key_material_bytes == first
    assert client.get_dek_key_material_bytes(dek) == first
    dek.key_material_bytes = None
    assert client.get_dek_key_material_bytes(dek) == second
