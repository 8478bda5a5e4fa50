import unittest

from fileutil.core.model.schema import FileDescriptor
from fileutil.core.paths import (
    get_directory,
    get_extension,
    get_file_object,
    is_directory,
    normalize_path,
    split_path,
)


class NormalizePathTest(unittest.TestCase):

    def test_collapses_separators(self):
        self.assertEqual(normalize_path("///Users///boom/myFile.txt"), "/Users/boom/myFile.txt")
        self.assertEqual(normalize_path("//Users/boom"), "/Users/boom")

    def test_resolves_dot_segments(self):
        self.assertEqual(normalize_path("/a/./b/../c.txt"), "/a/c.txt")

    def test_keeps_trailing_separator(self):
        self.assertEqual(normalize_path("path1////path2/"), "path1/path2/")
        self.assertEqual(normalize_path("/"), "/")

    def test_empty(self):
        self.assertEqual(normalize_path(""), "")
        self.assertEqual(normalize_path(None), "")


class SplitPathTest(unittest.TestCase):

    def test_three_parts(self):
        self.assertEqual(split_path("/path1/path2/myFile.txt"), ["path1", "path2", "myFile.txt"])

    def test_eight_parts(self):
        res = split_path("/path1/path2/path3/path4/path5/path6/path7/myFile.txt")
        self.assertEqual(len(res), 8)

    def test_empty_input(self):
        self.assertEqual(split_path(""), [])
        self.assertEqual(split_path(None), [])

    def test_redundant_separators_dropped(self):
        self.assertEqual(split_path("a//b///c/"), ["a", "b", "c"])

    def test_custom_delimiter(self):
        self.assertEqual(split_path("a\\b\\c.txt", "\\"), ["a", "b", "c.txt"])


class IsDirectoryTest(unittest.TestCase):

    def test_directory_path(self):
        self.assertIs(is_directory("/tmp/save/"), True)

    def test_file_path(self):
        self.assertIs(is_directory("/Users/boom/myFile.json"), False)

    def test_bare_word(self):
        self.assertIs(is_directory("hello"), True)

    def test_trailing_separator_after_filename(self):
        # only the last segment's content counts
        self.assertIs(is_directory("myFile.txt/"), False)
        self.assertIs(is_directory("///myFile.txt////"), False)

    def test_empty_is_directory(self):
        self.assertIs(is_directory(""), True)
        self.assertIs(is_directory("/"), True)

    def test_dotted_parent_does_not_matter(self):
        self.assertIs(is_directory("/srv/site.d/conf"), True)


class GetDirectoryTest(unittest.TestCase):

    def test_nested_file(self):
        self.assertEqual(get_directory("/path1/path2/path3/myFile.txt"), "/path1/path2/path3/")

    def test_redundant_separators(self):
        self.assertEqual(get_directory("path1////path2/path3//myFile.txt"), "/path1/path2/path3/")

    def test_root_and_bare_files(self):
        for p in ("/", "/myFile.txt", "myFile.txt/", "///myFile.txt/", "///myFile.txt////", "myFile.txt", ""):
            with self.subTest(path=p):
                self.assertEqual(get_directory(p), "/")

    def test_directory_is_kept(self):
        self.assertEqual(get_directory("/User/mike/project/"), "/User/mike/project/")
        self.assertEqual(get_directory("User/mike/project"), "/User/mike/project/")

    def test_custom_delimiter(self):
        self.assertEqual(get_directory("a\\b\\c.txt", "\\"), "\\a\\b\\")

    def test_dotted_last_segment_is_taken_as_file(self):
        self.assertEqual(get_directory("/etc/site.d/"), "/etc/")

    def test_shape_and_idempotence(self):
        samples = [
            "/path1/path2/path3/myFile.txt",
            "path1////path2/path3//myFile.txt",
            "relative/dir",
            "/srv/www/index.html",
            "./x/../y/z.json",
            "hello",
            "/",
        ]
        for p in samples:
            with self.subTest(path=p):
                d = get_directory(p)
                self.assertTrue(d.startswith("/"))
                self.assertTrue(d.endswith("/"))
                self.assertNotIn("//", d)
                self.assertEqual(get_directory(d), d)


class GetExtensionTest(unittest.TestCase):

    def test_last_suffix_only(self):
        self.assertEqual(get_extension("/a/myFile.boo.txt"), "txt")

    def test_hidden_file_has_no_extension(self):
        self.assertEqual(get_extension("/home/u/.bashrc"), "")

    def test_directory(self):
        self.assertEqual(get_extension("/Users/boom/"), "")
        self.assertEqual(get_extension(""), "")


class GetFileObjectTest(unittest.TestCase):

    def test_plain_file(self):
        res = get_file_object("/Users/boom/myFile.txt")
        self.assertIsInstance(res, FileDescriptor)
        self.assertEqual(res.to_dict(), {
            "mimetype": "text/plain",
            "name": "myFile.txt",
            "path": "/Users/boom/myFile.txt",
            "dir": "/Users/boom/",
            "extension": "txt",
        })

    def test_messy_path_with_double_extension(self):
        res = get_file_object("///Users///boom/myFile.boo.txt")
        self.assertEqual(res.mimetype, "text/plain")
        self.assertEqual(res.name, "myFile.boo.txt")
        self.assertEqual(res.path, "/Users/boom/myFile.boo.txt")
        self.assertEqual(res.dir, "/Users/boom/")
        self.assertEqual(res.extension, "txt")

    def test_directory(self):
        res = get_file_object("/Users/boom/")
        self.assertIs(res.mimetype, False)
        self.assertEqual(res.name, "")
        self.assertEqual(res.path, "/Users/boom/")
        self.assertEqual(res.dir, "/Users/boom/")
        self.assertEqual(res.extension, "")

    def test_unknown_extension(self):
        res = get_file_object("/data/blob.zzqx")
        self.assertIs(res.mimetype, False)
        self.assertEqual(res.name, "blob.zzqx")
        self.assertEqual(res.extension, "zzqx")

    def test_dotless_directory_named_like_an_extension(self):
        res = get_file_object("/srv/txt/")
        self.assertIs(res.mimetype, False)
        self.assertEqual(res.name, "")
        self.assertEqual(res.dir, "/srv/txt/")
        self.assertIs(get_file_object("/srv/json").mimetype, False)

    def test_bare_filename(self):
        res = get_file_object("notes.json")
        self.assertEqual(res.mimetype, "application/json")
        self.assertEqual(res.dir, "/")
        self.assertEqual(res.path, "notes.json")

    def test_empty_input(self):
        self.assertIsNone(get_file_object(""))
        self.assertIsNone(get_file_object(None))

    def test_descriptor_is_frozen(self):
        res = get_file_object("/a/b.txt")
        with self.assertRaises(Exception):
            res.name = "other.txt"


if __name__ == "__main__":
    unittest.main()
