import pytest
from lxml import etree

from tbx_convert.__main__ import run

sample_tbx = """<?xml version="1.0" encoding="UTF-8"?>
<martif type="TBX-Basic">
<text><body>
<termEntry id="e1">
<langSet xml:lang="en"><tig><term>cat</term></tig></langSet>
<langSet xml:lang="de"><tig><term>Katze</term></tig></langSet>
<langSet xml:lang="fr"><tig><term>chat</term></tig></langSet>
</termEntry>
</body></text>
</martif>
"""


@pytest.fixture
def tbx_file(tmp_path):
	path = tmp_path / "glossary.tbx"
	path.write_text(sample_tbx, encoding="utf-8")
	return path


class TestCli:
	def test_prints_tbxmin(self, tbx_file, capsys):
		assert run([str(tbx_file), "EN", "DE"]) == 0
		out = capsys.readouterr().out
		root = etree.fromstring(out.encode("utf-8"))
		assert root.get("dialect") == "TBX-Min"
		assert len(root.findall("body/entry/langGroup")) == 2

	def test_output_file(self, tbx_file, tmp_path):
		out = tmp_path / "glossary.min.tbx"
		assert run([str(tbx_file), "en", "de", "-o", str(out)]) == 0
		root = etree.parse(str(out)).getroot()
		assert root.findtext("body/entry/langGroup/termGroup/term") == "cat"

	def test_summary(self, tbx_file, capsys):
		assert run([str(tbx_file), "en", "de", "--summary"]) == 0
		err = capsys.readouterr().err
		assert "skipped_language" in err

	def test_missing_file(self, tmp_path, capsys):
		assert run([str(tmp_path / "nope.tbx"), "en", "de"]) == 1
		assert "Error" in capsys.readouterr().err

	def test_malformed(self, tmp_path, capsys):
		path = tmp_path / "bad.tbx"
		path.write_text("<martif><text></martif>", encoding="utf-8")
		assert run([str(path), "en", "de"]) == 1

	def test_empty_language_argument(self, tbx_file, capsys):
		with pytest.raises(SystemExit) as exc:
			run([str(tbx_file), "", "de"])
		assert exc.value.code == 2
		assert "Usage" in capsys.readouterr().err

	def test_wrong_argument_count(self, tbx_file):
		with pytest.raises(SystemExit) as exc:
			run([str(tbx_file), "en"])
		assert exc.value.code == 2
