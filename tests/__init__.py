import shutil
import tempfile
import unittest
from pathlib import Path


class FileTestCase(unittest.TestCase):
    """Test case with a private temporary directory for input files."""

    def setUp(self):
        self.tmp_dir = Path(tempfile.mkdtemp(prefix="chemistry_importer_"))
        self.addCleanup(shutil.rmtree, self.tmp_dir, ignore_errors=True)

    def write_file(self, name, content):
        path = self.tmp_dir / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
