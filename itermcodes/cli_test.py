import io
import os
import shutil
import tempfile
import unittest

from click.testing import CliRunner

from itermcodes.cli import cli
from itermcodes.dimension import Dimension
from itermcodes.image import File


PAYLOAD = b'PNGDATA'


class CliTest(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.mkdtemp()
        self.runner = CliRunner()
        self.env = {'ITERMCODES_HOME': self.tempdir}
        self.image_path = os.path.join(self.tempdir, 'divider.png')
        with open(self.image_path, 'wb') as f:
            f.write(PAYLOAD)

    def tearDown(self):
        shutil.rmtree(self.tempdir)

    def _invoke(self, args, **kwargs):
        return self.runner.invoke(cli, args, env=self.env, **kwargs)

    def _expected(self, builder, inline=True):
        out = io.BytesIO()
        if inline:
            builder.show(out=out)
        else:
            builder.download(out=out)
        return out.getvalue()

    def testImage(self):
        result = self._invoke([
            'image', self.image_path, '--width', '100%', '--height', '1px',
            '--no-preserve-aspect-ratio',
        ])
        self.assertEqual(result.exit_code, 0)

        expected = self._expected(
            File(PAYLOAD)
            .set_width(Dimension.percent(100))
            .set_height(Dimension.pixel(1))
            .set_preserve_aspect_ratio(False)
        )
        self.assertEqual(result.stdout_bytes, expected)

    def testImageWithoutOptions(self):
        result = self._invoke(['image', self.image_path])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout_bytes, self._expected(File(PAYLOAD)))

    def testImageUsesConfig(self):
        with open(os.path.join(self.tempdir, 'config.yml'), 'w') as f:
            f.write('image:\n  width: 50%\n  preserve_aspect_ratio: true\n')

        result = self._invoke(['image', self.image_path, '--height', '3'])
        self.assertEqual(result.exit_code, 0)
        expected = self._expected(
            File(PAYLOAD)
            .set_width(Dimension.percent(50))
            .set_height(Dimension.cells(3))
            .set_preserve_aspect_ratio(True)
        )
        self.assertEqual(result.stdout_bytes, expected)

    def testImageOptionsOverrideConfig(self):
        result = self._invoke([
            'image', self.image_path, '--width', '10px',
            '-o', 'image.width=90%',
        ])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(b'width=10px;', result.stdout_bytes)
        self.assertNotIn(b'90%', result.stdout_bytes)

    def testImageLogsSequenceSize(self):
        expected = self._expected(File(PAYLOAD))
        with self.assertLogs('itermcodes.cli', level='DEBUG') as logs:
            result = self._invoke(['image', self.image_path])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(
            'Showing {} ({} bytes)'.format(self.image_path, len(expected)),
            logs.output[0]
        )

    def testImageWithoutFlush(self):
        result = self._invoke(
            ['image', self.image_path, '-o', 'output.flush=false']
        )
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout_bytes, self._expected(File(PAYLOAD)))

    def testImageInvalidConfig(self):
        result = self._invoke(
            ['image', self.image_path, '-o', 'image.width=12em']
        )
        self.assertEqual(result.exit_code, 2)
        self.assertNotIn(b'\x1b]1337', result.stdout_bytes)

    def testImageMissingFile(self):
        missing = os.path.join(self.tempdir, 'missing.png')
        result = self._invoke(['image', missing, self.image_path])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('Error while reading', result.output)

    def testImageInvalidDimension(self):
        result = self._invoke(['image', self.image_path, '--width', '120%'])
        self.assertEqual(result.exit_code, 2)

    def testDownload(self):
        result = self._invoke(['download', self.image_path])
        self.assertEqual(result.exit_code, 0)
        expected = self._expected(
            File(PAYLOAD).set_name('divider.png').set_size(len(PAYLOAD)),
            inline=False
        )
        self.assertEqual(result.stdout_bytes, expected)

    def testDownloadLogsSequenceSize(self):
        expected = self._expected(
            File(PAYLOAD).set_name('divider.png').set_size(len(PAYLOAD)),
            inline=False
        )
        with self.assertLogs('itermcodes.cli', level='DEBUG') as logs:
            self._invoke(['download', self.image_path])
        self.assertIn('({} bytes)'.format(len(expected)), logs.output[0])

    def testDownloadWithNameAndWithoutSize(self):
        result = self._invoke([
            'download', self.image_path, '--name', 'line.png',
            '-o', 'download.size=false',
        ])
        self.assertEqual(result.exit_code, 0)
        expected = self._expected(
            File(PAYLOAD).set_name('line.png'), inline=False
        )
        self.assertEqual(result.stdout_bytes, expected)

    def testAnnotate(self):
        result = self._invoke([
            'annotate', 'look here', '--length', '9', '--coords', '3', '14',
        ])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(
            result.stdout_bytes,
            b'\x1b]1337;AddAnnotation=look here|9|3|14\x07'
        )

    def testAnnotateHidden(self):
        result = self._invoke(['annotate', 'secret', '--hidden'])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(
            result.stdout_bytes, b'\x1b]1337;AddHiddenAnnotation=secret\x07'
        )

    def testAnnotateCoordinatesWithoutLength(self):
        result = self._invoke(['annotate', 'look here', '--coords', '3', '14'])
        self.assertEqual(result.exit_code, 2)
        self.assertNotIn(b'\x1b]1337', result.stdout_bytes)

    def testLink(self):
        result = self._invoke(['link', 'https://google.com', 'google'])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(
            result.stdout_bytes,
            b'\x1b]8;;https://google.com\x07google\x1b]8;;\x07\n'
        )

    def testCursor(self):
        result = self._invoke(['cursor', 'bar'])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout_bytes, b'\x1b]1337;CursorShape=1\x07')

    def testAttention(self):
        result = self._invoke(['attention', 'fireworks'])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(
            result.stdout_bytes, b'\x1b]1337;RequestAttention=fireworks\x07'
        )

    def testCopyFromStdin(self):
        result = self._invoke(['copy'], input='copied')
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(
            result.stdout_bytes,
            b'\x1b]1337;CopyToClipboard=\x07copied\n\x1b]1337;EndCopy\x07'
        )

    def testTabColor(self):
        result = self._invoke(['tab-color', '255', '0', '0'])
        self.assertEqual(result.exit_code, 0)
        self.assertTrue(
            result.stdout_bytes.startswith(b'\x1b]6;1;bg;red;brightness;255')
        )

        result = self._invoke(['tab-color', '--reset'])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout_bytes, b'\x1b]6;1;bg;*;default\x07')

        result = self._invoke(['tab-color', '255'])
        self.assertEqual(result.exit_code, 2)

    def testConfig(self):
        result = self._invoke(['config', '-o', 'image.width=50%'])
        self.assertEqual(result.exit_code, 0)
        self.assertIn('width: 50%', result.output)


if __name__ == '__main__':
    unittest.main()
