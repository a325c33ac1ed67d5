"""
eip5564 Generate / Check / Recover Tests
"""

import logging

import pytest

from eip5564.core.types import (
    EthereumAddress,
    PrivateKey,
    PublicKey,
    StealthAddressResult,
)
from eip5564.crypto.entropy import DeterministicRandomSource
from eip5564.crypto.hash import keccak256
from eip5564.errors import (
    InvalidPrivateKeyError,
    InvalidViewTagError,
    MetaAddressWrongLengthError,
    PublicKeyNotOnCurveError,
)
from eip5564.protocol.derivation import public_key_of, shared_secret
from eip5564.protocol.generator import generate_stealth_address
from eip5564.protocol.keys import StealthKeys
from eip5564.protocol.meta_address import parse_meta_address
from eip5564.protocol.recovery import compute_stealth_key
from eip5564.protocol.scanner import check_stealth_address

from vectors import (
    KNOWN_EPHEMERAL_PRIVATE_KEY,
    KNOWN_STEALTH_ADDRESS,
    KNOWN_VIEW_TAG,
    META_ADDRESS,
    OFF_CURVE_PUBLIC_KEY,
    WRONG_SPENDING_PUBLIC_KEY,
    WRONG_VIEWING_PRIVATE_KEY,
)


@pytest.fixture
def generated(meta_address, random_source) -> StealthAddressResult:
    """A stealth address generated for the reference recipient."""
    return generate_stealth_address(meta_address, random_source)


class TestGenerate:
    """Tests for generate_stealth_address."""

    def test_result_shape(self, generated):
        """Test result carries a 20-byte address, 33-byte key and byte tag."""
        assert isinstance(generated.stealth_address, EthereumAddress)
        assert len(generated.stealth_address.data) == 20
        assert isinstance(generated.ephemeral_public_key, PublicKey)
        assert generated.ephemeral_public_key.data[0] in (0x02, 0x03)
        assert 0 <= generated.view_tag <= 255

    def test_accepts_parsed_meta_address(self, meta_address):
        """Test text and parsed meta-addresses give the same result."""
        a = generate_stealth_address(meta_address, DeterministicRandomSource(b"x"))
        b = generate_stealth_address(
            parse_meta_address(meta_address), DeterministicRandomSource(b"x")
        )
        assert a == b

    def test_reproducible_with_seed(self, meta_address):
        """Test identical seeds give identical outputs."""
        a = generate_stealth_address(meta_address, DeterministicRandomSource(b"seed"))
        b = generate_stealth_address(meta_address, DeterministicRandomSource(b"seed"))
        assert a == b

    def test_fresh_entropy_per_call(self, meta_address, random_source):
        """Test successive calls on one source give unlinkable addresses."""
        a = generate_stealth_address(meta_address, random_source)
        b = generate_stealth_address(meta_address, random_source)
        assert a.stealth_address != b.stealth_address
        assert a.ephemeral_public_key != b.ephemeral_public_key

    def test_system_random_default(self, meta_address):
        """Test the OS CSPRNG is used when no source is given."""
        a = generate_stealth_address(meta_address)
        b = generate_stealth_address(meta_address)
        assert a.ephemeral_public_key != b.ephemeral_public_key

    def test_fixed_ephemeral_key(self, curve, meta_address, viewing_public_key):
        """Test a supplied ephemeral key reproduces its derivation."""
        ephemeral = PrivateKey.from_int(0x1234567890ABCDEF)
        result = generate_stealth_address(meta_address, ephemeral_private_key=ephemeral)

        assert result.ephemeral_public_key == public_key_of(curve, ephemeral)
        secret = shared_secret(curve, viewing_public_key, ephemeral)
        assert result.view_tag == secret[0]

        again = generate_stealth_address(meta_address, ephemeral_private_key=ephemeral)
        assert again == result

    def test_address_derivation(self, curve, meta_address, viewing_public_key, spending_public_key):
        """Test the address is Keccak256 of the compressed stealth key, low 20 bytes."""
        ephemeral = PrivateKey.from_int(42)
        result = generate_stealth_address(meta_address, ephemeral_private_key=ephemeral)

        secret = keccak256(curve.multiply(viewing_public_key.data, ephemeral.data))
        stealth_point = curve.add(
            spending_public_key.data,
            curve.base_multiply(curve.reduce_scalar(secret)),
        )
        assert result.stealth_address.data == keccak256(stealth_point)[12:32]

    def test_debug_log_is_lazy(self, caplog, monkeypatch, meta_address, random_source):
        """Test generation logs the plain hex address and does no checksum work."""
        def fail(self):
            raise AssertionError("checksum computed for logging")

        monkeypatch.setattr(EthereumAddress, "to_checksum", fail)
        with caplog.at_level(logging.DEBUG, logger="eip5564.protocol.generator"):
            result = generate_stealth_address(meta_address, random_source)

        assert result.stealth_address.hex() in caplog.text

    def test_bad_meta_address(self):
        """Test codec errors propagate."""
        with pytest.raises(MetaAddressWrongLengthError):
            generate_stealth_address("st:eth:0x")


class TestCheck:
    """Tests for check_stealth_address."""

    def test_reference_with_view_tag(self, generated, viewing_private_key, spending_public_key):
        """Test the reference recipient recognises the address using the tag."""
        assert check_stealth_address(
            generated.stealth_address,
            generated.ephemeral_public_key,
            viewing_private_key,
            spending_public_key,
            generated.view_tag,
        )

    def test_reference_without_view_tag(self, generated, viewing_private_key, spending_public_key):
        """Test the full check without the tag."""
        assert check_stealth_address(
            generated.stealth_address,
            generated.ephemeral_public_key,
            viewing_private_key,
            spending_public_key,
        )

    def test_every_wrong_view_tag(self, generated, viewing_private_key, spending_public_key):
        """Test every nonzero delta to the view tag is rejected."""
        for delta in range(1, 256):
            assert not check_stealth_address(
                generated.stealth_address,
                generated.ephemeral_public_key,
                viewing_private_key,
                spending_public_key,
                (generated.view_tag + delta) % 256,
            )

    def test_wrong_spending_key(self, generated, viewing_private_key):
        """Test another spending public key does not match."""
        wrong = PublicKey.from_hex(WRONG_SPENDING_PUBLIC_KEY)
        assert not check_stealth_address(
            generated.stealth_address,
            generated.ephemeral_public_key,
            viewing_private_key,
            wrong,
            generated.view_tag,
        )
        assert not check_stealth_address(
            generated.stealth_address,
            generated.ephemeral_public_key,
            viewing_private_key,
            wrong,
        )

    def test_wrong_viewing_key(self, generated, spending_public_key):
        """Test another viewing private key does not match."""
        wrong = PrivateKey.from_hex(WRONG_VIEWING_PRIVATE_KEY)
        assert not check_stealth_address(
            generated.stealth_address,
            generated.ephemeral_public_key,
            wrong,
            spending_public_key,
        )

    def test_other_address(self, generated, viewing_private_key, spending_public_key):
        """Test a different candidate address with the right tag is rejected."""
        assert not check_stealth_address(
            EthereumAddress(bytes(20)),
            generated.ephemeral_public_key,
            viewing_private_key,
            spending_public_key,
            generated.view_tag,
        )

    def test_raw_bytes_inputs(self, generated, viewing_private_key, spending_public_key):
        """Test raw byte inputs are accepted."""
        assert check_stealth_address(
            generated.stealth_address.data,
            generated.ephemeral_public_key.data,
            viewing_private_key.data,
            spending_public_key.data,
            generated.view_tag,
        )

    def test_invalid_view_tag(self, generated, viewing_private_key, spending_public_key):
        """Test an out-of-range view tag is an error, not a mismatch."""
        with pytest.raises(InvalidViewTagError):
            check_stealth_address(
                generated.stealth_address,
                generated.ephemeral_public_key,
                viewing_private_key,
                spending_public_key,
                256,
            )

    def test_off_curve_ephemeral(self, generated, viewing_private_key, spending_public_key):
        """Test a malformed ephemeral key is an error."""
        with pytest.raises(PublicKeyNotOnCurveError):
            check_stealth_address(
                generated.stealth_address,
                PublicKey.from_hex(OFF_CURVE_PUBLIC_KEY),
                viewing_private_key,
                spending_public_key,
            )

    def test_zero_viewing_key(self, generated, spending_public_key):
        """Test a zero viewing key is an error."""
        with pytest.raises(InvalidPrivateKeyError):
            check_stealth_address(
                generated.stealth_address,
                generated.ephemeral_public_key,
                bytes(32),
                spending_public_key,
            )


class TestRecover:
    """Tests for compute_stealth_key."""

    def test_recovered_key_controls_address(
        self, curve, generated, viewing_private_key, spending_private_key
    ):
        """Test the recovered key derives the generated stealth address."""
        stealth_key = compute_stealth_key(
            generated.ephemeral_public_key,
            viewing_private_key,
            spending_private_key,
        )
        assert isinstance(stealth_key, PrivateKey)
        assert public_key_of(curve, stealth_key).to_address() == generated.stealth_address

    def test_recovered_key_matches_formula(
        self, curve, generated, viewing_private_key, spending_private_key
    ):
        """Test x = (k + (s mod n)) mod n."""
        secret = shared_secret(curve, generated.ephemeral_public_key, viewing_private_key)
        expected = (
            spending_private_key.to_int() + int.from_bytes(secret, "big")
        ) % curve.order
        stealth_key = compute_stealth_key(
            generated.ephemeral_public_key,
            viewing_private_key,
            spending_private_key,
        )
        assert stealth_key.to_int() == expected

    def test_wrong_viewing_key_recovers_other_key(
        self, curve, generated, spending_private_key
    ):
        """Test a different viewing key yields a key for another address."""
        stealth_key = compute_stealth_key(
            generated.ephemeral_public_key,
            PrivateKey.from_hex(WRONG_VIEWING_PRIVATE_KEY),
            spending_private_key,
        )
        assert public_key_of(curve, stealth_key).to_address() != generated.stealth_address

    @pytest.mark.parametrize("seed", [b"a", b"b", b"c", b"d", b"e"])
    def test_roundtrip_random_recipients(self, curve, seed):
        """Test generate, check and recover agree for fresh recipients."""
        source = DeterministicRandomSource(seed)
        keys = StealthKeys.generate(source)
        result = generate_stealth_address(keys.meta_address().to_text(), source)

        assert check_stealth_address(
            result.stealth_address,
            result.ephemeral_public_key,
            keys.viewing_private_key,
            keys.spending_public_key,
            result.view_tag,
        )
        stealth_key = compute_stealth_key(
            result.ephemeral_public_key,
            keys.viewing_private_key,
            keys.spending_private_key,
        )
        assert public_key_of(curve, stealth_key).to_address() == result.stealth_address


class TestReferenceVector:
    """End-to-end run of the reference recipient keys."""

    def test_reference_vector(self, curve, recipient_keys):
        """Test generate, check with/without tag and recover on the reference keys."""
        assert recipient_keys.meta_address().to_text() == META_ADDRESS

        result = generate_stealth_address(META_ADDRESS)

        assert check_stealth_address(
            result.stealth_address,
            result.ephemeral_public_key,
            recipient_keys.viewing_private_key,
            recipient_keys.spending_public_key,
            result.view_tag,
        )
        assert check_stealth_address(
            result.stealth_address,
            result.ephemeral_public_key,
            recipient_keys.viewing_private_key,
            recipient_keys.spending_public_key,
            None,
        )

        stealth_key = compute_stealth_key(
            result.ephemeral_public_key,
            recipient_keys.viewing_private_key,
            recipient_keys.spending_private_key,
        )
        assert public_key_of(curve, stealth_key).to_address() == result.stealth_address

    def test_known_answer(self, curve, recipient_keys):
        """Test a fixed ephemeral key yields the independently computed address and tag."""
        ephemeral = PrivateKey.from_int(KNOWN_EPHEMERAL_PRIVATE_KEY)
        result = generate_stealth_address(META_ADDRESS, ephemeral_private_key=ephemeral)

        assert result.stealth_address.hex() == KNOWN_STEALTH_ADDRESS
        assert result.view_tag == KNOWN_VIEW_TAG

        assert check_stealth_address(
            KNOWN_STEALTH_ADDRESS,
            result.ephemeral_public_key,
            recipient_keys.viewing_private_key,
            recipient_keys.spending_public_key,
            KNOWN_VIEW_TAG,
        )

        stealth_key = compute_stealth_key(
            result.ephemeral_public_key,
            recipient_keys.viewing_private_key,
            recipient_keys.spending_private_key,
        )
        assert public_key_of(curve, stealth_key).to_address().hex() == KNOWN_STEALTH_ADDRESS
