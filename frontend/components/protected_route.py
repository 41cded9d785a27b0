# =============================================================================
# frontend/components/protected_route.py - Route Gate
# =============================================================================

from dataclasses import dataclass
from typing import Callable, TypeVar, Union

T = TypeVar("T")

LOGIN_PATH = "/login"


@dataclass(frozen=True)
class Redirect:
    """Instruction to navigate elsewhere instead of rendering."""
    to: str = LOGIN_PATH


def protected_route(
    is_authenticated: bool,
    render: Callable[[], T],
    login_path: str = LOGIN_PATH,
) -> Union[T, Redirect]:
    """
    Render a page only for signed-in users.

    `render` is not called at all when the user is signed out, so none of
    the page's data fetching runs.

    Returns:
        render()'s result unchanged, or Redirect(to=login_path)
    """
    if not is_authenticated:
        return Redirect(to=login_path)
    return render()
