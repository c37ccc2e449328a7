from planner.text import content_disposition, export_filename, strip_markdown


def test_strip_markdown_removes_formatting():
	md = (
		"# Unit Title\n\n"
		"## Day 1: Roots\n"
		"**Essential Question:** Why *does* it matter?\n"
		"* first point\n"
		"+ second point\n"
		"- third point\n"
		"See [the guide](https://example.com/guide) and run `make plan`.\n"
	)
	assert strip_markdown(md) == (
		"Unit Title\n\n"
		"Day 1: Roots\n"
		"Essential Question: Why does it matter?\n"
		"- first point\n"
		"- second point\n"
		"- third point\n"
		"See the guide and run make plan."
	)


def test_strip_markdown_repairs_mojibake_and_blank_runs():
	assert strip_markdown("Itâ€™s fine\r\n\r\n\r\n\r\nnext line") == "It's fine\n\nnext line"


def test_strip_markdown_keeps_reserved_pdf_characters():
	assert strip_markdown("a (b) \\ c") == "a (b) \\ c"


def test_export_filename_replaces_non_alphanumerics():
	assert export_filename("Unit Test", "teacher") == "Unit_Test-teacher.pdf"
	assert export_filename("  Photosynthesis: Day 1/5!  ", "student") == "Photosynthesis_Day_1_5-student.pdf"


def test_export_filename_falls_back_when_nothing_is_left():
	assert export_filename("¿¡!!", "teacher") == "lesson_plan-teacher.pdf"


def test_export_filename_is_truncated(monkeypatch):
	monkeypatch.setattr("planner.text.settings.filename_max_length", 5)
	assert export_filename("abcdefgh", "teacher") == "abcde-teacher.pdf"


def test_content_disposition_carries_both_forms():
	header = content_disposition("Unit_Test-teacher.pdf")
	assert header.startswith('attachment; filename="Unit_Test-teacher.pdf"')
	assert "filename*=UTF-8''Unit_Test-teacher.pdf" in header


def test_strip_markdown_keeps_legitimate_circumflex():
	assert strip_markdown("CÂTEAU and Â gap") == "CÂTEAU and Â gap"
	assert strip_markdown("wide\u00a0gap and\u00c2\u00a0here") == "wide gap and here"
