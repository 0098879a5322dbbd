import io
import json
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import List, Tuple
from unittest import mock

from cipha import (
    UNSUPPORTED_CIPHER,
    FileUnreadableError,
    MissingInputError,
    UnknownCipherError,
    decode_message,
    encode_message,
    get_message,
    run_cipher,
    supported_ciphers,
)
from cipha.config import CiphaConfig, load_config, save_config
from cipha.history import log_event
from cipha.plugin import CipherPlugin, get_plugin
from cipha.main import main

CIPHA_ENV = {
    name: ""
    for name in ("CIPHA_SHIFT", "CIPHA_RAILS", "CIPHA_HISTORY", "CIPHA_HISTORY_PATH", "CIPHA_STRICT")
}


class TestDispatcher(unittest.TestCase):
    def test_supported_ciphers(self) -> None:
        self.assertEqual(
            supported_ciphers(),
            ["atbash", "caesar", "gematria", "morse", "railfence", "reverse", "rot13", "vigenere"],
        )

    def test_encode_and_decode(self) -> None:
        self.assertEqual(encode_message("rot13", "Hello, World!"), "Uryyb, Jbeyq!")
        self.assertEqual(encode_message("caesar", "Hello, World!"), "Khoor, Zruog!")
        self.assertEqual(decode_message("caesar", "Khoor, Zruog!", shift=3), "Hello, World!")
        self.assertEqual(decode_message("caesar", "Mjqqt", shift=5), "Hello")
        self.assertEqual(encode_message("reverse", "abc"), "cba")
        self.assertEqual(encode_message("gematria", "Hi"), "8 9")
        self.assertEqual(decode_message("gematria", "8 9"), "hi")
        self.assertEqual(encode_message("vigenere", "ATTACKATDAWN", key="LEMON"), "LXFOPVEFRNHR")
        self.assertEqual(decode_message("vigenere", "LXFOPVEFRNHR", key="LEMON"), "ATTACKATDAWN")
        self.assertEqual(encode_message("vigenere", "ATTACKATDAWN"), "ATTACKATDAWN")
        self.assertEqual(encode_message("morse", "sos"), "... --- ...")
        self.assertEqual(decode_message("morse", "... --- ..."), "SOS")
        self.assertEqual(encode_message("atbash", "ATTACKATDAWN"), "ZGGZXPZGWZDM")
        self.assertEqual(
            encode_message("railfence", "WEAREDISCOVEREDSAVEYOURSELF"),
            "WECRAOEERDSOEESVYUSLAIVDERF",
        )
        self.assertEqual(decode_message("railfence", "acebdf", rails=2), "abcdef")

    def test_plugin_params_are_immutable(self) -> None:
        self.assertEqual(CipherPlugin.params, ())
        self.assertEqual(get_plugin("rot13").params, ())
        self.assertEqual(get_plugin("caesar").params, ("shift",))
        self.assertEqual(get_plugin("vigenere").params, ("key",))
        self.assertEqual(get_plugin("railfence").params, ("rails",))
        for name in supported_ciphers():
            self.assertIsInstance(get_plugin(name).params, tuple)

    def test_unknown_cipher_sentinel(self) -> None:
        self.assertEqual(encode_message("enigma", "text"), UNSUPPORTED_CIPHER)
        self.assertEqual(decode_message("ROT13", "text"), "Unsupported cipher")

    def test_unknown_cipher_strict(self) -> None:
        with self.assertRaises(UnknownCipherError):
            run_cipher("encode", "enigma", "text", strict=True)

    def test_unknown_mode(self) -> None:
        self.assertEqual(run_cipher("scramble", "rot13", "text"), "Unsupported command")
        with self.assertRaises(ValueError):
            run_cipher("scramble", "rot13", "text", strict=True)

    def test_get_message_priority(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "msg.txt"
            path.write_text("from file", encoding="utf-8")
            self.assertEqual(get_message("inline", str(path)), "inline")
            self.assertEqual(get_message("", str(path)), "")
            self.assertEqual(get_message(None, str(path)), "from file")

    def test_get_message_errors(self) -> None:
        with self.assertRaises(MissingInputError):
            get_message(None, None)
        with TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "missing.txt"
            with self.assertRaises(FileUnreadableError) as ctx:
                get_message(None, str(missing))
            self.assertIsInstance(ctx.exception.__cause__, OSError)

            bad = Path(tmpdir) / "bad.txt"
            bad.write_bytes(b"\xff\xfe\xfa")
            with self.assertRaises(FileUnreadableError) as ctx:
                get_message(None, str(bad))
            self.assertIsInstance(ctx.exception.__cause__, UnicodeDecodeError)
            self.assertEqual(get_message(None, str(bad), encoding="latin-1"), "\xff\xfe\xfa")


class TestConfigAndHistory(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch.dict(os.environ, CIPHA_ENV)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_defaults_when_missing(self) -> None:
        with TemporaryDirectory() as tmpdir:
            cfg = load_config(Path(tmpdir) / "none.json")
            self.assertEqual(cfg.default_shift, 3)
            self.assertEqual(cfg.default_rails, 3)
            self.assertTrue(cfg.history_enabled)
            self.assertFalse(cfg.strict)

    def test_save_and_reload(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "cipha.json"
            save_config(CiphaConfig(default_shift=7, strict=True), path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.default_shift, 7)
            self.assertTrue(reloaded.strict)

    def test_env_overrides_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "cipha.json"
            save_config(CiphaConfig(default_shift=7), path)
            with mock.patch.dict(os.environ, {"CIPHA_SHIFT": "11", "CIPHA_HISTORY": "off"}):
                cfg = load_config(path)
            self.assertEqual(cfg.default_shift, 11)
            self.assertFalse(cfg.history_enabled)

    def test_malformed_file_falls_back(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "cipha.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), CiphaConfig())
            path.write_text(json.dumps({"default_shift": "many"}), encoding="utf-8")
            self.assertEqual(load_config(path).default_shift, 3)

    def test_log_event_appends_json_lines(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "history.jsonl"
            log_event("encode", {"cipher": "rot13"}, path=path)
            log_event("decode", {"cipher": "morse"}, path=path)
            records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
            self.assertEqual(records, [
                {"action": "encode", "cipher": "rot13"},
                {"action": "decode", "cipher": "morse"},
            ])

    def test_log_event_never_raises(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_event("encode", {}, path=Path(tmpdir) / "no" / "such" / "dir.jsonl")


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch.dict(os.environ, CIPHA_ENV)
        patcher.start()
        self.addCleanup(patcher.stop)
        tmp = TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.tmpdir = Path(tmp.name)
        self.history_path = self.tmpdir / "history.jsonl"
        self.config_path = self.tmpdir / "cipha.json"
        save_config(CiphaConfig(history_path=str(self.history_path)), self.config_path)

    def run_cli(self, argv: List[str]) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--config", str(self.config_path)] + argv)
        return out.getvalue()

    def run_cli_error(self, argv: List[str]) -> Tuple[int, str]:
        err = io.StringIO()
        with redirect_stderr(err), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--config", str(self.config_path)] + argv)
        return ctx.exception.code, err.getvalue()

    def test_version(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                main(["-V"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertEqual(out.getvalue(), "cipha 0.1.0\n")

    def test_encode_rot13(self) -> None:
        self.assertEqual(
            self.run_cli(["encode", "--cipher", "rot13", "--message", "Hello, World!"]),
            "Uryyb, Jbeyq!\n",
        )

    def test_encode_caesar(self) -> None:
        self.assertEqual(
            self.run_cli(["encode", "--cipher", "caesar", "--message", "Hello, World!", "--shift", "3"]),
            "Khoor, Zruog!\n",
        )

    def test_decode_rot13(self) -> None:
        self.assertEqual(
            self.run_cli(["decode", "--cipher", "rot13", "--message", "Uryyb, Jbeyq!"]),
            "Hello, World!\n",
        )

    def test_decode_caesar(self) -> None:
        self.assertEqual(
            self.run_cli(["decode", "--cipher", "caesar", "--message", "Khoor, Zruog!", "--shift", "3"]),
            "Hello, World!\n",
        )

    def test_caesar_default_shift_from_config(self) -> None:
        save_config(
            CiphaConfig(default_shift=1, history_path=str(self.history_path)), self.config_path
        )
        self.assertEqual(self.run_cli(["encode", "-c", "caesar", "-m", "abc"]), "bcd\n")

    def test_vigenere_and_railfence_options(self) -> None:
        self.assertEqual(
            self.run_cli(["encode", "-c", "vigenere", "-k", "LEMON", "-m", "ATTACKATDAWN"]),
            "LXFOPVEFRNHR\n",
        )
        self.assertEqual(self.run_cli(["decode", "-c", "railfence", "-r", "2", "-m", "acebdf"]), "abcdef\n")

    def test_read_file_and_write_output_file(self) -> None:
        source = self.tmpdir / "in.txt"
        source.write_text("ATTACKATDAWN", encoding="utf-8")
        target = self.tmpdir / "out.txt"
        out = self.run_cli(["-o", str(target), "encode", "-c", "atbash", "-f", str(source)])
        self.assertEqual(out, "")
        self.assertEqual(target.read_text(encoding="utf-8"), "ZGGZXPZGWZDM\n")

    def test_gematria_decode_with_huge_number(self) -> None:
        self.assertEqual(self.run_cli(["decode", "-c", "gematria", "-m", "9" * 5000 + " 1 2"]), "ab\n")

    def test_unknown_cipher_prints_sentinel(self) -> None:
        self.assertEqual(self.run_cli(["encode", "-c", "enigma", "-m", "hi"]), "Unsupported cipher\n")

    def test_unknown_cipher_strict_fails(self) -> None:
        code, err = self.run_cli_error(["--strict", "encode", "-c", "enigma", "-m", "hi"])
        self.assertEqual(code, 1)
        self.assertIn("Unsupported cipher: enigma", err)

    def test_missing_input(self) -> None:
        code, err = self.run_cli_error(["encode", "-c", "rot13"])
        self.assertEqual(code, 1)
        self.assertIn("Either --message or --file must be provided", err)

    def test_unreadable_file(self) -> None:
        code, err = self.run_cli_error(["decode", "-c", "rot13", "-f", str(self.tmpdir / "missing.txt")])
        self.assertEqual(code, 1)
        self.assertIn("Could not open file", err)

    def test_rails_must_be_positive(self) -> None:
        code, _ = self.run_cli_error(["encode", "-c", "railfence", "-r", "0", "-m", "abc"])
        self.assertEqual(code, 2)

    def test_list(self) -> None:
        out = self.run_cli(["list"])
        for name in supported_ciphers():
            self.assertIn(name, out)
        self.assertIn("--rails", out)

    def test_history_records_without_message_text(self) -> None:
        self.run_cli(["encode", "-c", "rot13", "-m", "secret words"])
        records = [json.loads(line) for line in self.history_path.read_text(encoding="utf-8").splitlines()]
        self.assertEqual(records, [{"action": "encode", "cipher": "rot13", "in_file": None, "out_file": None}])
        self.assertNotIn("secret", self.history_path.read_text(encoding="utf-8"))

    def test_no_history_flag(self) -> None:
        self.run_cli(["--no-history", "encode", "-c", "rot13", "-m", "x"])
        self.assertFalse(self.history_path.exists())


if __name__ == "__main__":
    unittest.main()
