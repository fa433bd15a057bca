"""
Unit tests for HashObject.

Tests verify:
- update() concatenation law and call-order sensitivity
- digest()/hexdigest() are repeatable, non-finalizing reads
- copy() independence in both directions
- Failed updates leave state untouched
- Snapshotting for primitives that finalize destructively
"""

import array

import pytest

import digestlib
from digestlib import TypeMismatchError
from digestlib.hashing import HashObject, HashStrategy, SHA256Strategy

ALGORITHMS = ["md5", "sha1", "sha224", "sha256", "sha384", "sha512"]
DIGEST_SIZES = {"md5": 16, "sha1": 20, "sha224": 28, "sha256": 32, "sha384": 48, "sha512": 64}
BLOCK_SIZES = {"md5": 64, "sha1": 64, "sha224": 64, "sha256": 64, "sha384": 128, "sha512": 128}

PAYLOADS = [
    (b"", b""),
    (b"a", b""),
    (b"", b"b"),
    (b"Nobody inspects", b" the spammish repetition"),
    (b"x" * 63, b"y" * 2),
    (b"\x00" * 127, b"\xff" * 129),
]


class TestUpdate:
    """Tests for update()."""

    @pytest.mark.parametrize("name", ALGORITHMS)
    @pytest.mark.parametrize(("a", "b"), PAYLOADS)
    def test_concatenation_law(self, name, a, b):
        """update(a); update(b) equals update(a + b)."""
        split = digestlib.new(name)
        split.update(a)
        split.update(b)

        joined = digestlib.new(name)
        joined.update(a + b)

        assert split.digest() == joined.digest()

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_many_small_updates(self, name):
        """Byte-at-a-time feeding matches one bulk update across block boundaries."""
        data = bytes(range(256)) * 3
        h = digestlib.new(name)
        for i in range(len(data)):
            h.update(data[i : i + 1])
        assert h.digest() == digestlib.new(name, data).digest()

    def test_order_matters(self):
        """Updates are applied in call order."""
        ab = digestlib.sha256()
        ab.update(b"a")
        ab.update(b"b")
        ba = digestlib.sha256()
        ba.update(b"b")
        ba.update(b"a")
        assert ab.digest() != ba.digest()

    def test_zero_updates(self, empty_digests):
        """An object never updated reports the empty digest."""
        assert digestlib.sha384().hexdigest() == empty_digests["sha384"]

    def test_empty_update_is_noop(self):
        """update(b'') does not change the state."""
        h = digestlib.md5(b"abc")
        before = h.digest()
        h.update(b"")
        assert h.digest() == before

    @pytest.mark.parametrize(
        "data",
        [
            bytearray(b"abc"),
            memoryview(b"abc"),
            memoryview(b"zabcz")[1:4],
            array.array("B", b"abc"),
            "abc",
        ],
    )
    def test_accepts_bytes_like_and_text(self, data, abc_digests):
        """Buffers and text are hashed as their bytes."""
        h = digestlib.sha1()
        h.update(data)
        assert h.hexdigest() == abc_digests["sha1"]

    @pytest.mark.parametrize("bad", [None, 7, 3.0, ["abc"], object()])
    def test_rejects_non_bytes_like(self, bad):
        """Bad input raises TypeMismatchError and leaves the state unchanged."""
        h = digestlib.sha256(b"prefix")
        before = h.digest()
        with pytest.raises(TypeMismatchError):
            h.update(bad)
        assert h.digest() == before

    def test_uses_construction_encoding_for_text(self):
        """Text passed to update() uses the encoding given at construction."""
        h = digestlib.md5(encoding="utf-16-le")
        h.update("hi")
        assert h.digest() == digestlib.md5("hi".encode("utf-16-le")).digest()


class TestDigest:
    """Tests for digest() and hexdigest()."""

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_sizes(self, name, hex_lengths):
        """Digest length matches digest_size; hex length is double."""
        h = digestlib.new(name, b"some data")
        assert len(h.digest()) == h.digest_size == DIGEST_SIZES[name]
        assert len(h.hexdigest()) == hex_lengths[name]

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_hexdigest_is_lowercase_hex_of_digest(self, name):
        """hexdigest() == digest().hex() and contains only [0-9a-f]."""
        h = digestlib.new(name, b"\xde\xad\xbe\xef")
        hexd = h.hexdigest()
        assert hexd == h.digest().hex()
        assert hexd == hexd.lower()
        assert set(hexd) <= set("0123456789abcdef")

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_repeatable(self, name):
        """Repeated reads without updates return identical bytes."""
        h = digestlib.new(name, b"data")
        assert h.digest() == h.digest() == h.digest()
        assert h.hexdigest() == h.hexdigest()

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_not_terminal(self, name):
        """update() after digest() continues the same stream."""
        peeked = digestlib.new(name, b"Nobody inspects")
        peeked.digest()
        peeked.hexdigest()
        peeked.update(b" the spammish repetition")

        expected = digestlib.new(name, b"Nobody inspects the spammish repetition")
        assert peeked.digest() == expected.digest()


class TestCopy:
    """Tests for copy()."""

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_copy_has_same_digest(self, name):
        """The copy reports the source's digest at copy time."""
        h = digestlib.new(name, b"shared prefix")
        c = h.copy()
        assert c.digest() == h.digest()
        assert c.name == h.name

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_updating_copy_leaves_source(self, name):
        """Updates to the copy do not reach the source."""
        h = digestlib.new(name, b"shared prefix")
        before = h.digest()
        c = h.copy()
        c.update(b" copy only")
        assert h.digest() == before
        assert c.digest() == digestlib.new(name, b"shared prefix copy only").digest()

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_updating_source_leaves_copy(self, name):
        """Updates to the source do not reach the copy."""
        h = digestlib.new(name, b"shared prefix")
        c = h.copy()
        snapshot = c.digest()
        h.update(b" source only")
        assert c.digest() == snapshot
        assert h.digest() != snapshot

    def test_copy_is_new_object(self):
        """copy() returns a distinct HashObject."""
        h = digestlib.sha1()
        c = h.copy()
        assert isinstance(c, HashObject)
        assert c is not h

    def test_copy_keeps_encoding(self):
        """The copy hashes text the same way as its source."""
        h = digestlib.sha256(encoding="latin-1")
        c = h.copy()
        c.update("é")
        assert c.digest() == digestlib.sha256("é".encode("latin-1")).digest()

    def test_common_prefix_reuse(self):
        """A copied prefix state serves several suffixes."""
        prefix = digestlib.sha512(b"common/")
        digests = {}
        for suffix in (b"a", b"b", b"c"):
            branch = prefix.copy()
            branch.update(suffix)
            digests[suffix] = branch.hexdigest()
        for suffix, digest in digests.items():
            assert digest == digestlib.sha512(b"common/" + suffix).hexdigest()


class TestAttributes:
    """Tests for name, digest_size, block_size and repr."""

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_block_size(self, name):
        """block_size reflects the primitive's block length."""
        assert digestlib.new(name).block_size == BLOCK_SIZES[name]

    def test_name_is_read_only(self):
        """name is fixed at creation."""
        h = digestlib.md5()
        with pytest.raises(AttributeError):
            h.name = "sha1"

    def test_repr(self):
        """repr shows the algorithm."""
        assert "name='sha224'" in repr(digestlib.sha224())


class _FinalizeOnceHasher:
    """Hasher double whose digest() can be taken only once."""

    def __init__(self, data: bytes = b""):
        self.data = data
        self.finalized = False

    def update(self, data: bytes) -> None:
        if self.finalized:
            raise RuntimeError("update after finalize")
        self.data += data

    def copy(self) -> "_FinalizeOnceHasher":
        return _FinalizeOnceHasher(self.data)

    def digest(self) -> bytes:
        if self.finalized:
            raise RuntimeError("digest after finalize")
        self.finalized = True
        return len(self.data).to_bytes(4, "big")


class _FinalizeOnceStrategy(SHA256Strategy):
    destructive_finalize = True

    def create_hasher(self):
        return _FinalizeOnceHasher()


class TestDestructiveFinalize:
    """Primitives that finalize destructively are snapshotted first."""

    def test_digest_repeatable_and_updatable(self):
        """digest() clones before finalizing, so the original keeps working."""
        strategy = _FinalizeOnceStrategy()
        hasher = strategy.create_hasher()
        h = HashObject(strategy, hasher)

        h.update(b"abc")
        assert h.digest() == (3).to_bytes(4, "big")
        assert h.digest() == (3).to_bytes(4, "big")
        h.update(b"de")
        assert h.digest() == (5).to_bytes(4, "big")
        assert hasher.finalized is False

    def test_default_strategies_are_non_destructive(self):
        """The stock primitives do not need cloning."""
        assert HashStrategy.destructive_finalize is False
        assert SHA256Strategy.destructive_finalize is False
