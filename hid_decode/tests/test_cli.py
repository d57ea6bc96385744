"""test the command line"""
import io
import json
import os
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from common_test_base import MOUSE_DESCRIPTOR, CommonTestBase

from hid_decode.cli import build_parser, main


class TestCommandLine(CommonTestBase):
    """test argument handling and exit status"""
    def run_main(self, argv: list[str]) -> tuple[int, str, str]:
        """run the cli, return status, stdout and stderr"""
        stdout: io.TextIOWrapper = io.TextIOWrapper(io.BytesIO(), encoding='utf-8')
        stderr: io.StringIO = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status: int = main(argv)
        return status, stdout.buffer.getvalue().decode('utf-8'), stderr.getvalue()

    def test_defaults(self):
        """stdout, json-v1, nothing skipped"""
        args = build_parser().parse_args(['rdesc.bin'])
        self.assertEqual(args.output_file, '-')
        self.assertEqual(args.format, 'json-v1')
        self.assertFalse(args.pretty)
        self.assertFalse(args.skip_data)

    def test_decode_to_stdout(self):
        """compact JSON on stdout"""
        with tempfile.TemporaryDirectory() as directory:
            path: str = self.write_descriptor(directory, MOUSE_DESCRIPTOR)
            status, stdout, stderr = self.run_main([path])
        self.assertEqual(status, 0)
        self.assertEqual(stderr, '')
        self.assertNotIn('\n', stdout)
        decoded: dict = json.loads(stdout)
        self.assertEqual(decoded['descriptor'], {'length': len(MOUSE_DESCRIPTOR), 'data': list(MOUSE_DESCRIPTOR)})
        self.assertEqual(len(decoded['items']), 26)

    def test_skip_data_implies_pretty(self):
        """--skip-data without --pretty is still indented"""
        with tempfile.TemporaryDirectory() as directory:
            path: str = self.write_descriptor(directory, MOUSE_DESCRIPTOR)
            _, stdout, _ = self.run_main(['--skip-data', path])
        self.assertIn('\n', stdout)
        self.assertNotIn('"data"', stdout)

    def test_output_file(self):
        """--output-file writes to the file and not to stdout"""
        with tempfile.TemporaryDirectory() as directory:
            path: str = self.write_descriptor(directory, MOUSE_DESCRIPTOR)
            output_file: str = os.path.join(directory, 'rdesc.json')
            status, stdout, _ = self.run_main(['--pretty', '--output-file', output_file, path])
            with open(output_file, 'r', encoding='utf-8') as json_file:
                self.assertEqual(len(json.load(json_file)['items']), 26)
        self.assertEqual(status, 0)
        self.assertEqual(stdout, '')

    def test_environment_defaults(self):
        """HID_DECODE_SKIP_DATA is honored"""
        with tempfile.TemporaryDirectory() as directory:
            path: str = self.write_descriptor(directory, MOUSE_DESCRIPTOR)
            with mock.patch.dict(os.environ, {'HID_DECODE_SKIP_DATA': 'true'}):
                _, stdout, _ = self.run_main([path])
        self.assertNotIn('"data"', stdout)

    def test_missing_file(self):
        """unreadable input is an error, nothing on stdout"""
        with tempfile.TemporaryDirectory() as directory:
            status, stdout, stderr = self.run_main([os.path.join(directory, 'missing.bin')])
        self.assertEqual(status, 1)
        self.assertEqual(stdout, '')
        self.assertTrue(stderr.startswith('Error: cannot read'))

    def test_malformed_descriptor(self):
        """malformed descriptors are an error, nothing on stdout"""
        with tempfile.TemporaryDirectory() as directory:
            path: str = self.write_descriptor(directory, bytes.fromhex('0501' '26ff'))
            status, stdout, stderr = self.run_main([path])
        self.assertEqual(status, 1)
        self.assertEqual(stdout, '')
        self.assertIn('truncated item', stderr)

    def test_bad_format(self):
        """only json-v1 is supported"""
        with tempfile.TemporaryDirectory() as directory:
            path: str = self.write_descriptor(directory, MOUSE_DESCRIPTOR)
            status, _, stderr = self.run_main(['--format', 'xml', path])
        self.assertEqual(status, 1)
        self.assertIn("unsupported format 'xml'", stderr)
