"""Editor launching operations."""

from bo.gateway.editor.abc import Editor as Editor
from bo.gateway.editor.fake import FakeEditor as FakeEditor
from bo.gateway.editor.real import RealEditor as RealEditor
