from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

from redmine_client.client import RedmineClient
from redmine_client.core.errors import RedmineClientError
from redmine_client.models import UpdateAttachmentParams, UploadToken
from redmine_client.resources._payloads import body, segment


async def upload_file(client: RedmineClient, content: bytes | str | Path) -> UploadToken:
    """
    Send raw file content to /uploads.json.

    Accepts bytes or a path to a local file. The returned token is then
    referenced from issues, news, wiki pages or project files through
    {"token", "filename", "content_type"}; see UploadToken.as_ref().
    The client's max_upload_size applies to the file content.
    """
    if isinstance(content, (str, Path)):
        path = Path(content)
        if not path.is_file():
            raise RedmineClientError(f"File not found: {content}")
        content = path.read_bytes()
    return await client.request_model(UploadToken, "POST", "uploads", content)


async def get_attachment(client: RedmineClient, attachment_id: int) -> Dict[str, Any]:
    return await client.request("GET", f"attachments/{segment(attachment_id)}")


async def update_attachment(
    client: RedmineClient,
    attachment_id: int,
    attachment: UpdateAttachmentParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "PUT",
        f"attachments/{segment(attachment_id)}",
        body("attachment", UpdateAttachmentParams, attachment),
    )


async def delete_attachment(client: RedmineClient, attachment_id: int) -> Dict[str, Any]:
    return await client.request("DELETE", f"attachments/{segment(attachment_id)}")
