# tests/test_gateway.py

"""
Tests for the remote data gateway against mocked Supabase / S3 clients.
"""

from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError

from core.errors import StoreReadError, StoreWriteError, UploadError
from core.gateway import Collection, RemoteDataGateway


@pytest.fixture
def s3():
    return Mock()


@pytest.fixture
def gateway(mock_supabase_client, s3):
    return RemoteDataGateway(
        client_factory=lambda: mock_supabase_client,
        s3_factory=lambda: (s3, "sky-bucket", "eu-west-1"),
    )


def test_get_all_returns_rows(gateway, mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.select.return_value.execute.return_value = Mock(data=[{"id": "1"}, {"id": "2"}])

    assert gateway.get_all(Collection.units) == [{"id": "1"}, {"id": "2"}]
    mock_supabase_client.table.assert_called_with("units")
    table.select.assert_called_with("*")


def test_get_all_failure_is_store_read_error(gateway, mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.select.return_value.execute.side_effect = Exception("connection reset")

    with pytest.raises(StoreReadError) as exc:
        gateway.get_all(Collection.tickets)
    assert "connection reset" in str(exc.value)


def test_get_one_missing_is_none(gateway, mock_supabase_client):
    query = mock_supabase_client.table.return_value.select.return_value
    query.eq.return_value.limit.return_value.execute.return_value = Mock(data=[])

    assert gateway.get_one(Collection.properties, "nope") is None
    query.eq.assert_called_with("id", "nope")


def test_guest_requests_table_name(gateway, mock_supabase_client):
    mock_supabase_client.table.return_value.select.return_value.execute.return_value = Mock(data=[])
    gateway.get_all(Collection.guest_requests)
    mock_supabase_client.table.assert_called_with("guestRequests")


def test_set_writes_whole_document_with_id(gateway, mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.upsert.return_value.execute.return_value = Mock(data=[{"id": "p1", "name": "Tower A"}])

    stored = gateway.set_or_merge(Collection.properties, "p1", {"name": "Tower A"})

    table.upsert.assert_called_once_with({"name": "Tower A", "id": "p1"})
    assert stored == {"id": "p1", "name": "Tower A"}


def test_merge_updates_by_id(gateway, mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.update.return_value.eq.return_value.execute.return_value = Mock(data=[{"id": "t1", "status": "closed"}])

    stored = gateway.set_or_merge(Collection.tickets, "t1", {"status": "closed"}, merge=True)

    table.update.assert_called_once_with({"status": "closed"})
    table.update.return_value.eq.assert_called_once_with("id", "t1")
    assert stored["status"] == "closed"


def test_merge_of_missing_document_is_none(gateway, mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.update.return_value.eq.return_value.execute.return_value = Mock(data=[])

    assert gateway.set_or_merge(Collection.tickets, "gone", {"status": "closed"}, merge=True) is None


def test_write_failure_is_store_write_error(gateway, mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.upsert.return_value.execute.side_effect = Exception("permission denied")

    with pytest.raises(StoreWriteError):
        gateway.set_or_merge(Collection.units, "u1", {"unitNumber": "101"})


def test_delete_one_reports_whether_a_row_went(gateway, mock_supabase_client):
    table = mock_supabase_client.table.return_value
    table.delete.return_value.eq.return_value.execute.return_value = Mock(data=[{"id": "u1"}])
    assert gateway.delete_one(Collection.units, "u1") is True

    table.delete.return_value.eq.return_value.execute.return_value = Mock(data=[])
    assert gateway.delete_one(Collection.units, "u1") is False


def test_unconfigured_client_raises():
    gateway = RemoteDataGateway(client_factory=lambda: None)

    with pytest.raises(StoreReadError):
        gateway.get_all(Collection.units)
    with pytest.raises(StoreWriteError):
        gateway.delete_one(Collection.units, "u1")


def test_upload_blob_returns_bucket_url(gateway, s3):
    with patch("core.s3_client.settings") as mock_settings:
        mock_settings.S3_PUBLIC_BASE_URL = None
        url = gateway.upload_blob("thumbnails/1_a.png", b"png", "image/png")

    s3.put_object.assert_called_once_with(
        Bucket="sky-bucket", Key="thumbnails/1_a.png", Body=b"png", ContentType="image/png"
    )
    assert url == "https://sky-bucket.s3.eu-west-1.amazonaws.com/thumbnails/1_a.png"


def test_upload_blob_uses_public_base_url(gateway):
    with patch("core.s3_client.settings") as mock_settings:
        mock_settings.S3_PUBLIC_BASE_URL = "https://cdn.sky.test/"
        url = gateway.upload_blob("properties/1_t.glb", b"glb")

    assert url == "https://cdn.sky.test/properties/1_t.glb"


def test_upload_failure_is_upload_error(gateway, s3):
    s3.put_object.side_effect = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")

    with pytest.raises(UploadError):
        gateway.upload_blob("properties/1_t.glb", b"glb")


def test_missing_aws_credentials_is_upload_error():
    def no_s3():
        raise RuntimeError("Missing AWS credentials")

    gateway = RemoteDataGateway(client_factory=lambda: None, s3_factory=no_s3)

    with pytest.raises(UploadError) as exc:
        gateway.upload_blob("properties/1_t.glb", b"glb")
    assert "Missing AWS credentials" in str(exc.value)
