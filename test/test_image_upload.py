import re

from gallery.utils.image_utils import generate_filename


def test_upload_missing_files(client):
    response = client.post('/api/upload', data={}, content_type="multipart/form-data")
    assert response.status_code == 400
    assert response.get_json() == {'error': 'No files uploaded.'}


def test_upload_missing_files_leaves_gallery_untouched(client, upload):
    upload(("cat.png", b"png"))
    before = client.get('/api/gallery').get_json()

    response = client.post('/api/upload', data={'photos': []}, content_type="multipart/form-data")

    assert response.status_code == 400
    assert sorted(client.get('/api/gallery').get_json()) == sorted(before)


def test_upload_single_file(upload, config):
    response = upload(("cat.png", b"fake png bytes"))

    assert response.status_code == 200
    image_urls = response.get_json()['imageUrls']
    assert len(image_urls) == 1
    assert re.fullmatch(r"/uploads/photos-\d+\.png", image_urls[0])

    stored = config.uploads_dir / image_urls[0].rsplit("/", 1)[1]
    assert stored.read_bytes() == b"fake png bytes"


def test_upload_keeps_order_and_extensions(upload):
    response = upload(("a.jpg", b"1"), ("b.gif", b"2"), ("c.webp", b"3"), ("noext", b"4"))

    image_urls = response.get_json()['imageUrls']
    assert len(image_urls) == 4
    assert len(set(image_urls)) == 4
    assert re.fullmatch(r"/uploads/photos-\d+\.jpg", image_urls[0])
    assert re.fullmatch(r"/uploads/photos-\d+\.gif", image_urls[1])
    assert re.fullmatch(r"/uploads/photos-\d+\.webp", image_urls[2])
    assert re.fullmatch(r"/uploads/photos-\d+", image_urls[3])


def test_upload_same_millisecond_gets_distinct_names(upload, mocker):
    mocker.patch("gallery.utils.image_utils.time.time", return_value=1700000000.0)

    response = upload(("a.png", b"1"), ("b.png", b"2"))

    assert response.get_json()['imageUrls'] == [
        "/uploads/photos-1700000000000.png",
        "/uploads/photos-1700000000001.png",
    ]


def test_upload_write_failure(upload, mocker):
    mocker.patch(
        "gallery.endpoints.image_upload.save_uploaded_images",
        side_effect=OSError("disk full"),
    )
    response = upload(("cat.png", b"png"))
    assert response.status_code == 500
    assert response.get_json() == {'error': 'Failed to upload images.'}


def test_generate_filename():
    assert generate_filename("photos", "cat.png", 123) == "photos-123.png"
    assert generate_filename("photos", "archive.tar.gz", 5) == "photos-5.gz"
    assert generate_filename("photos", ".hidden", 5) == "photos-5"


def test_failed_batch_is_rolled_back(client, upload, mocker, config):
    mocker.patch(
        "werkzeug.datastructures.FileStorage.save",
        side_effect=[None, OSError("disk full")],
    )

    response = upload(("a.png", b"1"), ("b.png", b"2"))

    assert response.status_code == 500
    assert client.get('/api/gallery').get_json() == []
    assert list(config.uploads_dir.iterdir()) == []


def test_upload_never_overwrites_existing_file(upload, mocker, config):
    mocker.patch("gallery.utils.image_utils.time.time", return_value=1700000000.0)
    (config.uploads_dir / "photos-1700000000000.png").write_bytes(b"first")

    response = upload(("cat.png", b"second"))

    assert response.get_json()['imageUrls'] == ["/uploads/photos-1700000000001.png"]
    assert (config.uploads_dir / "photos-1700000000000.png").read_bytes() == b"first"
    assert (config.uploads_dir / "photos-1700000000001.png").read_bytes() == b"second"
