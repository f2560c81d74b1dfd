"""
Tests for the token codec and the signature engine.
"""

import base64
import json
import string

import pytest

from bouncer.core.types import ParsedToken, Token
from bouncer.errors import ConfigurationError, ErrorCode, MalformedTokenError
from bouncer.token import SignatureEngine, TokenCodec
from bouncer.util.encoding import base64_decode


def encode_raw(obj) -> str:
    return base64.b64encode(json.dumps(obj).encode("utf-8")).decode("ascii")


@pytest.fixture
def codec():
    return TokenCodec()


@pytest.fixture
def token():
    return Token(session_id="1234-5678-9123-4567", user_id=1, expiration_time=1893456000000)


class TestTokenCodec:
    """Test payload encoding and decoding"""

    def test_encode_produces_base64_json_with_wire_names(self, codec, token):
        """Test payload is base64 of the camelCase JSON object"""
        payload = codec.encode(token)
        data = json.loads(base64.b64decode(payload))
        assert data == {
            "sessionId": "1234-5678-9123-4567",
            "userId": 1,
            "expirationTime": 1893456000000,
        }

    def test_encode_is_compact(self, codec, token):
        """Test JSON uses compact separators"""
        raw = base64.b64decode(codec.encode(token)).decode("utf-8")
        assert " " not in raw

    def test_decode_restores_token(self, codec, token):
        """Test decode inverts encode"""
        assert codec.decode(codec.encode(token)) == token

    def test_decode_ignores_field_order(self, codec):
        """Test decoding is keyed by field name"""
        payload = encode_raw({"expirationTime": 5, "userId": "alice", "sessionId": "abc"})
        assert codec.decode(payload) == Token("abc", "alice", 5)

    def test_decode_rejects_invalid_base64(self, codec):
        """Test non-base64 input is malformed"""
        with pytest.raises(MalformedTokenError):
            codec.decode("not base64!")

    def test_decode_rejects_invalid_json(self, codec):
        """Test base64 of non-JSON is malformed"""
        payload = base64.b64encode(b"{not json").decode("ascii")
        with pytest.raises(MalformedTokenError):
            codec.decode(payload)

    def test_decode_rejects_non_object(self, codec):
        """Test a JSON array is malformed"""
        with pytest.raises(MalformedTokenError):
            codec.decode(encode_raw(["abc", 1, 5]))

    @pytest.mark.parametrize("missing", ["sessionId", "userId", "expirationTime"])
    def test_decode_rejects_missing_field(self, codec, missing):
        """Test every field is required"""
        data = {"sessionId": "abc", "userId": 1, "expirationTime": 5}
        del data[missing]
        with pytest.raises(MalformedTokenError) as exc_info:
            codec.decode(encode_raw(data))
        assert exc_info.value.details["missing"] == [missing]
        assert exc_info.value.error_code == ErrorCode.MALFORMED_TOKEN

    @pytest.mark.parametrize("data", [
        {"sessionId": "", "userId": 1, "expirationTime": 5},
        {"sessionId": 7, "userId": 1, "expirationTime": 5},
        {"sessionId": "abc", "userId": True, "expirationTime": 5},
        {"sessionId": "abc", "userId": None, "expirationTime": 5},
        {"sessionId": "abc", "userId": 1, "expirationTime": "tomorrow"},
        {"sessionId": "abc", "userId": 1, "expirationTime": False},
    ])
    def test_decode_rejects_wrong_types(self, codec, data):
        """Test fields must have the expected types"""
        with pytest.raises(MalformedTokenError):
            codec.decode(encode_raw(data))

    def test_decode_rejects_non_finite_expiration(self, codec):
        """Test Infinity is not a usable expiration"""
        raw = '{"sessionId":"abc","userId":1,"expirationTime":Infinity}'
        payload = base64.b64encode(raw.encode("utf-8")).decode("ascii")
        with pytest.raises(MalformedTokenError):
            codec.decode(payload)

    def test_decode_rejects_fractional_expiration(self, codec):
        """Test expirations must be whole milliseconds"""
        payload = encode_raw({"sessionId": "abc", "userId": 1, "expirationTime": 5.5})
        with pytest.raises(MalformedTokenError):
            codec.decode(payload)

    def test_decode_accepts_integral_float_expiration(self, codec):
        """Test 5.0 is read as the exact millisecond 5"""
        payload = encode_raw({"sessionId": "abc", "userId": 1, "expirationTime": 5.0})
        assert codec.decode(payload).expiration_time == 5


class TestParsedToken:
    """Test splitting encoded tokens"""

    def test_split_and_join(self):
        """Test a two-part token splits and rejoins"""
        parsed = ParsedToken.from_string("payload.signature")
        assert parsed == ParsedToken("payload", "signature")
        assert str(parsed) == "payload.signature"

    @pytest.mark.parametrize("value", ["", "no-separator", "a.b.c", ".sig", "payload.", None])
    def test_malformed_strings_rejected(self, value):
        """Test anything but two non-empty parts is malformed"""
        with pytest.raises(MalformedTokenError):
            ParsedToken.from_string(value)


class TestSignatureEngine:
    """Test signing and verification"""

    @pytest.fixture
    def engine(self, rsa_keys):
        return SignatureEngine.from_pem(*rsa_keys)

    def test_sign_then_verify(self, engine):
        """Test a fresh signature verifies"""
        signature = engine.sign("payload")
        assert engine.verify("payload", signature) is True

    def test_signature_is_base64(self, engine):
        """Test signatures are standard base64"""
        signature = engine.sign("payload")
        assert len(base64.b64decode(signature, validate=True)) == 256

    def test_verify_rejects_other_payload(self, engine):
        """Test a signature only covers its own payload"""
        signature = engine.sign("payload")
        assert engine.verify("payload2", signature) is False

    def test_verify_rejects_tampered_signature(self, engine):
        """Test changing a signature byte fails verification"""
        signature = bytearray(base64.b64decode(engine.sign("payload")))
        signature[10] ^= 0x01
        tampered = base64.b64encode(bytes(signature)).decode("ascii")
        assert engine.verify("payload", tampered) is False

    def test_verify_rejects_non_canonical_signature(self, engine):
        """Test unused bits before the padding cannot be set"""
        signature = engine.sign("payload")
        assert signature.endswith("=")
        index = len(signature.rstrip("=")) - 1
        alphabet = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
        forged = alphabet[alphabet.index(signature[index]) ^ 1]
        tampered = signature[:index] + forged + signature[index + 1:]

        assert base64.b64decode(tampered) == base64.b64decode(signature)
        assert engine.verify("payload", tampered) is False

    @pytest.mark.parametrize("signature", ["", "signature", "!!!", "AAAA", None])
    def test_verify_never_raises(self, engine, signature):
        """Test structurally invalid signatures are just False"""
        assert engine.verify("payload", signature) is False

    def test_verify_rejects_signature_from_other_key(self, engine, other_rsa_keys):
        """Test signatures from another key pair do not verify"""
        other = SignatureEngine.from_pem(*other_rsa_keys)
        assert engine.verify("payload", other.sign("payload")) is False

    def test_ec_keys(self, ec_keys):
        """Test EC key pairs sign with ECDSA"""
        engine = SignatureEngine.from_pem(*ec_keys)
        assert engine.algorithm == "ES256"
        assert engine.verify("payload", engine.sign("payload")) is True

    def test_encrypted_private_key(self, encrypted_rsa_keys):
        """Test passphrase protected keys load with the passphrase"""
        private_pem, public_pem, passphrase = encrypted_rsa_keys
        engine = SignatureEngine.from_pem(private_pem, public_pem, passphrase)
        assert engine.algorithm == "RS256"
        assert engine.verify("payload", engine.sign("payload")) is True

    def test_wrong_passphrase_is_configuration_error(self, encrypted_rsa_keys):
        """Test a wrong passphrase fails at construction"""
        private_pem, public_pem, _ = encrypted_rsa_keys
        with pytest.raises(ConfigurationError) as exc_info:
            SignatureEngine.from_pem(private_pem, public_pem, "wrong")
        assert exc_info.value.error_code == ErrorCode.INVALID_KEY

    def test_missing_passphrase_is_configuration_error(self, encrypted_rsa_keys):
        """Test an encrypted key without passphrase fails at construction"""
        private_pem, public_pem, _ = encrypted_rsa_keys
        with pytest.raises(ConfigurationError):
            SignatureEngine.from_pem(private_pem, public_pem)

    def test_malformed_pem_is_configuration_error(self, rsa_keys):
        """Test garbage key material fails at construction"""
        with pytest.raises(ConfigurationError):
            SignatureEngine.from_pem("privatePem", rsa_keys[1])
        with pytest.raises(ConfigurationError):
            SignatureEngine.from_pem(rsa_keys[0], "publicPem")

    def test_mismatched_keys_are_configuration_error(self, rsa_keys, other_rsa_keys):
        """Test a public key from another pair is rejected"""
        with pytest.raises(ConfigurationError) as exc_info:
            SignatureEngine.from_pem(rsa_keys[0], other_rsa_keys[1])
        assert exc_info.value.error_code == ErrorCode.KEY_MISMATCH


class TestBase64:
    """Test strict base64 decoding"""

    def test_decode_canonical(self):
        """Test canonical padded input decodes"""
        assert base64_decode("QQ==") == b"A"

    @pytest.mark.parametrize("value", ["QR==", "QUJ=", "QQ", "Q Q==", "QQ==\n"])
    def test_decode_rejects_non_canonical(self, value):
        """Test strings that are not the canonical encoding are rejected"""
        with pytest.raises(ValueError):
            base64_decode(value)
