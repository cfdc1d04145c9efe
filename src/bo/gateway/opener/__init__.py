"""Browser launching operations."""

from bo.gateway.opener.abc import UrlOpener as UrlOpener
from bo.gateway.opener.fake import FakeUrlOpener as FakeUrlOpener
from bo.gateway.opener.fake import OpenCall as OpenCall
from bo.gateway.opener.real import RealUrlOpener as RealUrlOpener
