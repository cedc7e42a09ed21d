import unittest

from gdrivefetch.config import DriveOptions
from gdrivefetch.downloader import export_or_download, fetch_file, walk
from gdrivefetch.errors import ApiError, NetworkError, NotFoundError
from gdrivefetch.provider import InMemoryDriveProvider

DOC = "application/vnd.google-apps.document"
SHEET = "application/vnd.google-apps.spreadsheet"
SLIDES = "application/vnd.google-apps.presentation"
FORM = "application/vnd.google-apps.form"
DRAWING = "application/vnd.google-apps.drawing"
XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PPTX = "application/vnd.openxmlformats-officedocument.presentationml.presentation"


def _scenario_tree() -> InMemoryDriveProvider:
    provider = InMemoryDriveProvider()
    provider.add_folder("R", "Root")
    provider.add_file("f1", "a.txt", "text/plain", b"alpha", "R")
    provider.add_folder("sub", "Sub", "R")
    provider.add_file(
        "f2",
        "Report",
        DOC,
        parent_id="sub",
        exports={"application/pdf": b"%PDF-1.4 report"},
    )
    return provider


class TestExportOrDownload(unittest.TestCase):
    def test_verbatim_download_keeps_name_and_type(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_file("f1", "photo.jpg", "image/jpeg", b"\xff\xd8\xff")

        result = export_or_download(provider, "f1", "Pics/photo.jpg")

        self.assertEqual(result.name, "photo.jpg")
        self.assertEqual(result.path, "Pics/photo.jpg")
        self.assertEqual(result.mime_type, "image/jpeg")
        self.assertEqual(result.data, b"\xff\xd8\xff")
        self.assertEqual(result.size, 3)
        self.assertEqual(result.original_name, "photo.jpg")
        self.assertEqual(result.original_mime_type, "image/jpeg")
        self.assertFalse(result.was_exported)
        self.assertEqual(
            [c[0] for c in provider.calls],
            ["get_metadata", "download_raw"],
        )

    def test_export_mapping_for_every_workspace_type(self) -> None:
        cases = [
            (DOC, "application/pdf", "Doc.pdf"),
            (SHEET, XLSX, "Doc.xlsx"),
            (SLIDES, PPTX, "Doc.pptx"),
            (FORM, "application/pdf", "Doc.pdf"),
            (DRAWING, "image/png", "Doc.png"),
        ]
        for native, target, name in cases:
            with self.subTest(native=native):
                provider = InMemoryDriveProvider()
                provider.add_file("d", "Doc", native, exports={target: b"converted"})

                result = export_or_download(provider, "d", "Doc")

                self.assertEqual(result.name, name)
                self.assertEqual(result.path, name)
                self.assertEqual(result.mime_type, target)
                self.assertEqual(result.original_name, "Doc")
                self.assertEqual(result.original_mime_type, native)
                self.assertTrue(result.was_exported)
                self.assertEqual(result.data, b"converted")
                self.assertEqual(provider.calls[-1][0], "export_as")

    def test_size_is_downloaded_length_not_metadata_size(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_file(
            "d",
            "Sheet",
            SHEET,
            b"tiny",
            exports={XLSX: b"x" * 4096},
        )

        result = export_or_download(provider, "d", "Sheet")

        self.assertEqual(result.size, 4096)
        self.assertEqual(result.size, len(result.data))

    def test_metadata_failure_returns_none(self) -> None:
        provider = InMemoryDriveProvider()

        with self.assertLogs("gdrivefetch.downloader", level="ERROR") as logs:
            result = export_or_download(provider, "missing", "x/missing.txt")

        self.assertIsNone(result)
        self.assertIn("x/missing.txt", logs.output[0])

    def test_content_failure_returns_none(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_file("d", "Report", DOC)
        provider.fail("export_as", "d", ApiError("export failed"))

        with self.assertLogs("gdrivefetch.downloader", level="ERROR"):
            self.assertIsNone(export_or_download(provider, "d", "Report"))

    def test_fetch_file_propagates_errors(self) -> None:
        provider = InMemoryDriveProvider()
        with self.assertRaises(NotFoundError):
            fetch_file(provider, "missing", "missing", DriveOptions())

    def test_options_forwarded_to_provider(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_file("f1", "a.txt", "text/plain", b"a")
        options = DriveOptions(include_shared_drive_support=True)

        export_or_download(provider, "f1", "a.txt", options)

        self.assertTrue(all(c[2] is options for c in provider.calls))


class TestWalk(unittest.TestCase):
    def test_scenario(self) -> None:
        result = walk(_scenario_tree(), "R")

        self.assertEqual(len(result), 2)
        a, report = result
        self.assertEqual(
            (a.name, a.path, a.mime_type, a.was_exported),
            ("a.txt", "a.txt", "text/plain", False),
        )
        self.assertEqual(
            (report.name, report.path, report.mime_type, report.was_exported),
            ("Report.pdf", "Sub/Report.pdf", "application/pdf", True),
        )
        self.assertEqual(report.original_name, "Report")

    def test_depth_first_preorder_by_listing_order(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_folder("R", "Root")
        provider.add_folder("A", "A", "R")
        provider.add_file("a1", "a1", "text/plain", b"1", "A")
        provider.add_folder("AA", "AA", "A")
        provider.add_file("aa1", "aa1", "text/plain", b"2", "AA")
        provider.add_file("a2", "a2", "text/plain", b"3", "A")
        provider.add_file("r1", "r1", "text/plain", b"4", "R")
        provider.add_folder("B", "B", "R")
        provider.add_file("b1", "b1", "text/plain", b"5", "B")

        result = walk(provider, "R")

        self.assertEqual(
            [f.path for f in result],
            ["A/a1", "A/AA/aa1", "A/a2", "r1", "B/b1"],
        )

    def test_file_before_folder_order(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_folder("R", "Root")
        provider.add_file("A", "A", "text/plain", b"a", "R")
        provider.add_folder("B", "B", "R")
        provider.add_file("C", "C", "text/plain", b"c", "B")

        self.assertEqual([f.name for f in walk(provider, "R")], ["A", "C"])

    def test_current_path_prefixes_results(self) -> None:
        result = walk(_scenario_tree(), "sub", "Root/Sub")
        self.assertEqual([f.path for f in result], ["Root/Sub/Report.pdf"])

    def test_empty_folder(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_folder("R", "Root")
        provider.add_folder("E", "Empty", "R")
        self.assertEqual(walk(provider, "R"), [])

    def test_each_leaf_exactly_once(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_folder("R", "Root")
        expected = []
        for i in range(3):
            provider.add_folder(f"d{i}", f"d{i}", "R")
            for j in range(2):
                provider.add_file(f"f{i}{j}", f"f{j}.bin", "application/octet-stream", b"x", f"d{i}")
                expected.append(f"d{i}/f{j}.bin")

        result = walk(provider, "R")

        self.assertEqual([f.path for f in result], expected)

    def test_item_failure_is_skipped(self) -> None:
        provider = _scenario_tree()
        provider.add_file("f3", "b.txt", "text/plain", b"beta", "R")
        provider.fail("download_raw", "f1", NetworkError("reset"))

        with self.assertLogs("gdrivefetch.downloader", level="ERROR"):
            result = walk(provider, "R")

        self.assertEqual([f.path for f in result], ["Sub/Report.pdf", "b.txt"])

    def test_subfolder_listing_failure_keeps_siblings(self) -> None:
        provider = _scenario_tree()
        provider.add_file("f3", "z.txt", "text/plain", b"zed", "R")
        provider.fail("list_children", "sub")

        with self.assertLogs("gdrivefetch.downloader", level="ERROR") as logs:
            result = walk(provider, "R")

        self.assertEqual([f.path for f in result], ["a.txt", "z.txt"])
        self.assertIn("Sub", logs.output[0])

    def test_root_listing_failure_returns_empty(self) -> None:
        provider = _scenario_tree()
        provider.fail("list_children", "R")

        with self.assertLogs("gdrivefetch.downloader", level="ERROR"):
            self.assertEqual(walk(provider, "R"), [])

    def test_missing_mime_type_is_folder_only_in_shared_drive_context(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_folder("R", "Root", drive_id="D")
        provider.add_folder("S", "Untyped", "R", drive_id="D", mime_type="")
        provider.add_file("f", "inner.txt", "text/plain", b"i", "S", drive_id="D")

        shared = walk(provider, "R", "", DriveOptions(include_shared_drive_support=True))
        self.assertEqual([f.path for f in shared], ["Untyped/inner.txt"])

        # Without shared-drive context the untyped item is treated as a file.
        with self.assertLogs("gdrivefetch.downloader", level="DEBUG"):
            personal = walk(provider, "R")
        self.assertEqual([(f.path, f.data) for f in personal], [("Untyped", b"")])

    def test_shortcuts_are_downloaded_as_items(self) -> None:
        provider = InMemoryDriveProvider()
        provider.add_folder("R", "Root")
        provider.add_file("s", "link", "application/vnd.google-apps.shortcut", parent_id="R")
        provider.fail("download_raw", "s", ApiError("shortcut has no content"))

        with self.assertLogs("gdrivefetch.downloader", level="ERROR"):
            self.assertEqual(walk(provider, "R"), [])


if __name__ == "__main__":
    unittest.main()
