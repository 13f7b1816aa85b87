"""
Abstract page-driver interface.

Defines the two capability sets the pipeline is built on. Any
browser-automation backend implementing them can drive discovery,
generation and execution.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ElementHandle(ABC):
    """
    A lazily evaluated set of elements on the page.

    Queries resolve when awaited. Interactions act on the single
    element the handle points to.
    """

    # Element queries
    @abstractmethod
    async def all(self) -> list["ElementHandle"]:
        """Resolves the set into one handle per matched element."""
        pass

    @abstractmethod
    def first(self) -> "ElementHandle":
        """Handle for the first matched element."""
        pass

    @abstractmethod
    def query(self, selector: str) -> "ElementHandle":
        """Handle for descendants matching selector."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    # Element state
    @abstractmethod
    async def is_visible(self, timeout_ms: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    async def is_enabled(self) -> bool:
        pass

    @abstractmethod
    async def is_checked(self) -> bool:
        pass

    # Element properties
    @abstractmethod
    async def text_content(self) -> Optional[str]:
        pass

    @abstractmethod
    async def all_text_contents(self) -> list[str]:
        pass

    @abstractmethod
    async def input_value(self) -> str:
        pass

    @abstractmethod
    async def get_attribute(self, name: str) -> Optional[str]:
        pass

    @abstractmethod
    async def tag_name(self) -> str:
        """Lower-case tag name of the element."""
        pass

    @abstractmethod
    def native_selector(self) -> str:
        """
        Backend-specific string that re-selects this handle.

        Only meaningful within the current browser session.
        """
        pass

    # Element actions
    @abstractmethod
    async def click(self) -> None:
        pass

    @abstractmethod
    async def hover(self) -> None:
        pass

    @abstractmethod
    async def fill(self, value: str) -> None:
        pass

    @abstractmethod
    async def clear(self) -> None:
        pass

    @abstractmethod
    async def focus(self) -> None:
        pass

    @abstractmethod
    async def blur(self) -> None:
        pass

    @abstractmethod
    async def select_option(self, value: str) -> None:
        pass

    @abstractmethod
    async def check(self) -> None:
        pass

    @abstractmethod
    async def uncheck(self) -> None:
        pass

    @abstractmethod
    async def press(self, key: str) -> None:
        pass

    @abstractmethod
    async def screenshot(self, path: str) -> None:
        pass


class PageDriver(ABC):
    """
    Abstract interface to a browser page.

    The page session is owned by the caller; the pipeline only
    borrows it.
    """

    # Navigation
    @abstractmethod
    async def navigate(self, url: str) -> None:
        pass

    @abstractmethod
    def current_url(self) -> str:
        pass

    @abstractmethod
    async def title(self) -> str:
        pass

    # Element selection
    @abstractmethod
    def query(self, selector: str) -> ElementHandle:
        pass

    # Waiting
    @abstractmethod
    async def wait(self, ms: int) -> None:
        """Fixed delay."""
        pass

    @abstractmethod
    async def screenshot(self, path: str) -> None:
        """Captures the whole page to path."""
        pass
