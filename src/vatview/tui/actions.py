"""Side effects triggered from the TUI.

The only one is opening an entity's page in the system browser. It is
fire-and-forget: the caller never waits on the browser and navigation
state is not touched.
"""

import webbrowser

from vatview.tui.projector import ControllerRow, PilotRow, SelectedRow


def entity_cid(row: SelectedRow) -> int:
    match row:
        case PilotRow(pilot=pilot):
            return pilot.cid
        case ControllerRow(controller=controller):
            return controller.cid
    raise TypeError(f"Unknown row type: {row!r}")


def entity_url(row: SelectedRow, url_template: str) -> str:
    """Fill the {cid} placeholder of the configured page template.

    Raises ValueError if the template has other placeholders or bad braces.
    """
    try:
        return url_template.format(cid=entity_cid(row))
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(f"Invalid browser URL template {url_template!r}: {e!r}") from e


def open_in_browser(row: SelectedRow, url_template: str) -> str:
    """Open the entity's page. Returns the URL.

    Raises webbrowser.Error or OSError if the browser could not be started,
    ValueError if the template is malformed.
    """
    url = entity_url(row, url_template)
    if not webbrowser.open(url):
        raise webbrowser.Error(f"No browser could open {url}")
    return url
