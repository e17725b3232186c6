from app.services.content_parser import ContentParser


def test_get_markdown_content_reads_file(tmp_path):
    (tmp_path / "blog").mkdir()
    (tmp_path / "blog" / "post.md").write_text("---\ntitle: T\n---\nbody", "utf-8")
    parser = ContentParser(tmp_path)

    assert parser.get_markdown_content({"path": "blog/post.md"}) == (
        "---\ntitle: T\n---\nbody"
    )


def test_get_markdown_content_falls_back_to_id(tmp_path):
    (tmp_path / "post.md").write_text("hello", "utf-8")
    parser = ContentParser(tmp_path)

    assert parser.get_markdown_content({"_id": "post.md"}) == "hello"


def test_get_markdown_content_strips_bom_and_bad_bytes(tmp_path):
    (tmp_path / "post.md").write_bytes(b"\xef\xbb\xbfhello \xff")
    parser = ContentParser(tmp_path)

    assert parser.get_markdown_content({"path": "post.md"}) == "hello �"


def test_missing_file_returns_empty(tmp_path):
    parser = ContentParser(tmp_path)

    assert parser.get_markdown_content({"path": "nope.md"}) == ""
    assert parser.get_binary_content({"path": "nope.md"}) is None
    assert parser.get_binary_content({}) is None


def test_directory_returns_none(tmp_path):
    (tmp_path / "blog").mkdir()
    parser = ContentParser(tmp_path)

    assert parser.get_binary_content({"path": "blog"}) is None


def test_refuses_paths_outside_root(tmp_path, caplog):
    root = tmp_path / "public"
    root.mkdir()
    (tmp_path / "secret.txt").write_text("secret", "utf-8")
    parser = ContentParser(root)

    assert parser.get_binary_content({"path": "../secret.txt"}) is None
    assert "outside" in caplog.text


def test_get_binary_content_returns_bytes(tmp_path):
    (tmp_path / "logo.png").write_bytes(b"\x89PNG")
    parser = ContentParser(tmp_path)

    assert parser.get_binary_content({"path": "logo.png"}) == b"\x89PNG"
