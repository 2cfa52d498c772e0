import pytest
from click.testing import CliRunner
from xor_sleuth.cli import cli
from xor_sleuth.utils import xor_bytes

PLAINTEXT = b"Now that the party is jumping, the bass kicks in and the Vega's are pumpin'."


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def ciphertext_file(tmp_path):
    path = tmp_path / "ciphertext.hex"
    path.write_text(xor_bytes(PLAINTEXT, 0x37).hex() + "\n")
    return path


class TestCrack:
    """Test suite for the crack command"""

    def test_finds_key(self, runner, ciphertext_file):
        result = runner.invoke(cli, ["crack", str(ciphertext_file)])
        assert result.exit_code == 0, result.output
        assert f"Found {2 * len(PLAINTEXT)} bytes of hex-encoded ciphertext" in result.output
        assert f"Found {len(PLAINTEXT)} bytes of ciphertext" in result.output
        assert "Best key 37" in result.output

    def test_quiet_hides_key_table(self, runner, ciphertext_file):
        result = runner.invoke(cli, ["crack", "-q", str(ciphertext_file)])
        assert result.exit_code == 0, result.output
        assert "Best key 37" in result.output
        assert "Errors" not in result.output

    def test_key_table(self, runner, ciphertext_file):
        result = runner.invoke(cli, ["crack", str(ciphertext_file)])
        assert "Errors" in result.output
        assert "ff" in result.output

    def test_ignore_errors(self, runner, ciphertext_file):
        result = runner.invoke(cli, ["crack", "-q", "-i", "-e", "0", str(ciphertext_file)])
        assert result.exit_code == 0, result.output
        assert "Best key 37" in result.output

    def test_no_candidate(self, runner, ciphertext_file):
        """Test a zero allowance exits with an error"""
        result = runner.invoke(cli, ["crack", "-q", "-e", "0", str(ciphertext_file)])
        assert result.exit_code == 1
        assert "No key decoded" in result.output
        assert "Best key" not in result.output

    def test_no_candidate_shows_key_table(self, runner, ciphertext_file):
        """Test the filtered keys are still listed when nothing passes"""
        result = runner.invoke(cli, ["crack", "-e", "0", str(ciphertext_file)])
        assert result.exit_code == 1
        assert "Errors" in result.output
        assert "No key decoded" in result.output

    def test_empty_ciphertext(self, runner, tmp_path):
        path = tmp_path / "empty.hex"
        path.write_text("\n")
        result = runner.invoke(cli, ["crack", str(path)])
        assert result.exit_code == 1
        assert "Ciphertext is empty" in result.output

    def test_spaced_hex_rejected(self, runner, tmp_path):
        path = tmp_path / "spaced.hex"
        path.write_text("1b 37 37\n")
        result = runner.invoke(cli, ["crack", str(path)])
        assert result.exit_code == 1
        assert "Invalid hex ciphertext" in result.output

    def test_invalid_hex(self, runner, tmp_path):
        path = tmp_path / "bad.hex"
        path.write_text("not hex")
        result = runner.invoke(cli, ["crack", str(path)])
        assert result.exit_code == 1
        assert "Invalid hex ciphertext" in result.output

    def test_raw_format(self, runner, tmp_path):
        path = tmp_path / "ciphertext.bin"
        path.write_bytes(xor_bytes(PLAINTEXT, 0x37))
        result = runner.invoke(cli, ["crack", "-q", "-f", "raw", str(path)])
        assert result.exit_code == 0, result.output
        assert "Best key 37" in result.output
        assert "encoded" not in result.output


class TestEncode:
    """Test suite for the encode command"""

    def test_encode(self, runner, tmp_path):
        path = tmp_path / "plaintext.txt"
        path.write_bytes(b"Cooking MC's like a pound of bacon\n")
        result = runner.invoke(cli, ["encode", "58", str(path)])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"

    def test_encode_then_crack(self, runner, tmp_path):
        plaintext_path = tmp_path / "plaintext.txt"
        plaintext_path.write_bytes(PLAINTEXT)
        encoded = runner.invoke(cli, ["encode", "0x5a", str(plaintext_path)])
        ciphertext_path = tmp_path / "ciphertext.hex"
        ciphertext_path.write_text(encoded.output)
        result = runner.invoke(cli, ["crack", "-q", str(ciphertext_path)])
        assert "Best key 5a" in result.output

    def test_bad_key(self, runner, tmp_path):
        path = tmp_path / "plaintext.txt"
        path.write_bytes(b"abc")
        result = runner.invoke(cli, ["encode", "1ff", str(path)])
        assert result.exit_code == 1
        assert "one byte" in result.output


class TestIc:
    """Test suite for the ic command"""

    def test_raw(self, runner, tmp_path):
        path = tmp_path / "input.bin"
        path.write_bytes(b"AAAAAAAAAA\n")
        result = runner.invoke(cli, ["ic", str(path)])
        assert result.exit_code == 0, result.output
        assert result.output == "10\t1.00000\n"

    def test_hex(self, runner, tmp_path):
        path = tmp_path / "input.hex"
        path.write_text("616162")
        result = runner.invoke(cli, ["ic", "--hex", str(path)])
        assert result.output == "3\t0.33333\n"

    def test_too_short(self, runner, tmp_path):
        path = tmp_path / "input.bin"
        path.write_bytes(b"A")
        result = runner.invoke(cli, ["ic", str(path)])
        assert result.exit_code == 1
        assert "at least 2 bytes" in result.output


class TestLogLevel:
    """Test suite for the --log-level option"""

    def test_debug_logging(self, runner, ciphertext_file):
        """Test per-key and result events are logged at debug"""
        result = runner.invoke(cli, ["--log-level", "debug", "crack", "-q", str(ciphertext_file)])
        assert result.exit_code == 0, result.output
        assert "Best key 37" in result.output
        assert "key scored" in result.output
        assert "key filtered" in result.output
        assert "best key" in result.output

    def test_default_level_hides_events(self, runner, ciphertext_file):
        """Test the default warning level keeps search events out of the output"""
        result = runner.invoke(cli, ["crack", "-q", str(ciphertext_file)])
        assert result.exit_code == 0, result.output
        assert "key scored" not in result.output
        assert "key filtered" not in result.output
        assert "best key" not in result.output

    def test_info_logging(self, runner, ciphertext_file):
        result = runner.invoke(cli, ["--log-level", "info", "crack", "-q", str(ciphertext_file)])
        assert "best key" in result.output
        assert "key scored" not in result.output
