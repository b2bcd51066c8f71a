# tests/unit/test_parser.py
import pytest
from checkcommit.review.parser import parse_diff, filter_diff, is_excluded


SAMPLE_DIFF = """diff --git a/src/main.cs b/src/main.cs
index 1111111..2222222 100644
--- a/src/main.cs
+++ b/src/main.cs
@@ -11,4 +11,6 @@ void Hello()
     Print("hello");
+    Print("world");
+    return;
 
 void Goodbye()
 {
diff --git a/package-lock.json b/package-lock.json
index 3333333..4444444 100644
--- a/package-lock.json
+++ b/package-lock.json
@@ -1,3 +1,3 @@
 {
-  "version": "1.0.0"
+  "version": "1.0.1"
 }
"""


@pytest.mark.unit
def test_parse_diff_extracts_files():
    files = parse_diff(SAMPLE_DIFF)

    assert [f.path for f in files] == ["src/main.cs", "package-lock.json"]
    assert files[0].is_new is False
    assert files[0].added == 2
    assert files[1].removed == 1


@pytest.mark.unit
def test_parse_diff_new_file():
    diff = """--- /dev/null
+++ b/new_file.cs
@@ -0,0 +1,2 @@
+class New {}
+
"""
    files = parse_diff(diff)

    assert len(files) == 1
    assert files[0].path == "new_file.cs"
    assert files[0].is_new is True


@pytest.mark.unit
def test_is_excluded():
    assert is_excluded("package-lock.json", ["*.json"])
    assert not is_excluded("src/main.cs", ["*.json", "*.md"])


@pytest.mark.unit
def test_filter_diff_drops_excluded_files():
    filtered = filter_diff(SAMPLE_DIFF, ["*.json"])

    assert "src/main.cs" in filtered
    assert "package-lock.json" not in filtered
    assert '+    Print("world");' in filtered


@pytest.mark.unit
def test_filter_diff_without_patterns_is_identity():
    assert filter_diff(SAMPLE_DIFF, []) == SAMPLE_DIFF


@pytest.mark.unit
def test_filter_diff_everything_excluded():
    assert filter_diff(SAMPLE_DIFF, ["*"]) == ""
