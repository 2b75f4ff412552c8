"""Resource wrappers, one per Paperless-ngx API family."""

from paperless_sdk.resources.auth import AuthResource
from paperless_sdk.resources.correspondents import CorrespondentsResource
from paperless_sdk.resources.document_types import DocumentTypesResource
from paperless_sdk.resources.documents import DocumentsResource, build_upload_form
from paperless_sdk.resources.tags import TagsResource
from paperless_sdk.resources.tasks import TasksResource
from paperless_sdk.resources.users import UsersResource

__all__ = [
    "AuthResource",
    "CorrespondentsResource",
    "DocumentTypesResource",
    "DocumentsResource",
    "TagsResource",
    "TasksResource",
    "UsersResource",
    "build_upload_form",
]
