import unittest

from gdocbackup.models import RemoteDocument, ResolvedPath


class TestResolvedPath(unittest.TestCase):
    def test_first_chain_is_canonical(self) -> None:
        resolved = ResolvedPath(
            chains=(("Drive", "Folder1"), ("Drive", "Folder2")),
            name="Doc",
            extension=".docx",
        )
        self.assertEqual(resolved.canonical_chain, ("Drive", "Folder1"))
        self.assertEqual(resolved.relative_path(), "Drive/Folder1/Doc.docx")
        self.assertEqual(
            resolved.candidate_paths(),
            ["Drive/Folder1/Doc.docx", "Drive/Folder2/Doc.docx"],
        )

    def test_relative_path_is_sanitized(self) -> None:
        resolved = ResolvedPath(chains=(("Drive", ".."),), name="a/b", extension=".xlsx")
        self.assertEqual(resolved.relative_path(), "Drive/__/a_b.xlsx")

    def test_dot_names_are_sanitized_before_the_extension(self) -> None:
        single = ResolvedPath(chains=(("Drive",),), name=".", extension=".docx")
        double = ResolvedPath(chains=(("Drive",),), name="..", extension=".docx")
        self.assertEqual(single.relative_path(), "Drive/_.docx")
        self.assertEqual(double.relative_path(), "Drive/__.docx")
        self.assertEqual(double.candidate_paths(), ["Drive/__.docx"])

    def test_requires_a_chain(self) -> None:
        with self.assertRaises(ValueError):
            ResolvedPath(chains=(), name="Doc", extension=".docx")


class TestRemoteDocument(unittest.TestCase):
    def test_defaults(self) -> None:
        doc = RemoteDocument(
            id="D1",
            name="Doc",
            version=3,
            owner="me",
            mime_type="application/vnd.google-apps.document",
        )
        self.assertEqual(doc.parent_ids, ())
        self.assertIsNone(doc.modified_time)


if __name__ == "__main__":
    unittest.main()
