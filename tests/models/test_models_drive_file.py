import unittest

from wecaredrive.models import drive_file_from_dict


class TestDriveFile(unittest.TestCase):
    def test_drive_file_from_dict(self) -> None:
        info = drive_file_from_dict(
            {
                "id": "F1",
                "name": "n.pdf",
                "mimeType": "application/pdf",
                "size": "123",
                "createdTime": "2025-01-01T00:00:00.000Z",
                "modifiedTime": "2025-01-02T00:00:00.000Z",
                "webViewLink": "https://drive/view",
                "parents": ["P1"],
            }
        )
        self.assertEqual(info.file_id, "F1")
        self.assertEqual(info.size, 123)
        self.assertEqual(info.created_time, "2025-01-01T00:00:00.000Z")
        self.assertEqual(info.web_view_link, "https://drive/view")
        self.assertIsNone(info.web_content_link)
        self.assertEqual(info.parents, ["P1"])

    def test_drive_file_from_dict_tolerates_missing_fields(self) -> None:
        info = drive_file_from_dict({"id": "F2"})
        self.assertEqual(info.name, "")
        self.assertEqual(info.size, 0)
        self.assertIsNone(info.modified_time)
        self.assertEqual(info.parents, [])

    def test_drive_file_without_id(self) -> None:
        self.assertEqual(drive_file_from_dict({"name": "x"}).file_id, "")


if __name__ == "__main__":
    unittest.main()
