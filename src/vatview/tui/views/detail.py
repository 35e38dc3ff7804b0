"""Detail popup text for the selected pilot or controller."""

from rich.markup import escape

from vatview.models import Controller, Pilot, Snapshot
from vatview.tui.columns import PLACEHOLDER
from vatview.tui.projector import ControllerRow, PilotRow, SelectedRow


def detail_title(row: SelectedRow) -> str:
    match row:
        case PilotRow(pilot=pilot):
            return f"Pilot {pilot.callsign}"
        case ControllerRow(controller=controller):
            return f"Controller {controller.callsign}"
    return "Details"


def detail_lines(row: SelectedRow, snapshot: Snapshot) -> list[str]:
    match row:
        case PilotRow(pilot=pilot):
            return _pilot_lines(pilot)
        case ControllerRow(controller=controller):
            return _controller_lines(controller, snapshot)
    return []


def _pilot_lines(pilot: Pilot) -> list[str]:
    lines = [
        f"Callsign:    {pilot.callsign}",
        f"Name:        {pilot.name}",
        f"CID:         {pilot.cid}",
        f"Server:      {pilot.server}",
        f"Position:    {pilot.latitude}, {pilot.longitude}",
        f"Altitude:    {pilot.altitude} ft",
        f"Groundspeed: {pilot.groundspeed} kts",
        f"Heading:     {pilot.heading}",
        f"Transponder: {pilot.transponder}",
        f"QNH:         {pilot.qnh_i_hg} inHg / {pilot.qnh_mb} mb",
        f"Logon:       {pilot.logon_time}",
        "",
    ]

    plan = pilot.flight_plan
    if plan is None:
        lines.append("Flight plan: (none filed)")
        return lines

    lines += [
        "Flight plan:",
        f"  Rules:     {plan.flight_rules or PLACEHOLDER}",
        f"  Aircraft:  {plan.aircraft or PLACEHOLDER}",
        f"  From:      {plan.departure or PLACEHOLDER}",
        f"  To:        {plan.arrival or PLACEHOLDER}",
        f"  Alternate: {plan.alternate or PLACEHOLDER}",
        f"  Cruise:    {plan.altitude or PLACEHOLDER} @ {plan.cruise_tas or PLACEHOLDER} kts",
        f"  Departs:   {plan.deptime or PLACEHOLDER}",
        f"  Enroute:   {plan.enroute_time or PLACEHOLDER}",
        f"  Route:     {plan.route or PLACEHOLDER}",
    ]
    if plan.remarks:
        lines.append(f"  Remarks:   {plan.remarks}")
    return lines


def _controller_lines(controller: Controller, snapshot: Snapshot) -> list[str]:
    lines = [
        f"Callsign:  {controller.callsign}",
        f"Name:      {controller.name}",
        f"CID:       {controller.cid}",
        f"Frequency: {controller.frequency}",
        f"Facility:  {snapshot.facility_label(controller.facility)}",
        f"Rating:    {snapshot.rating_label(controller.rating)}",
        f"Range:     {controller.visual_range} nm",
        f"Server:    {controller.server}",
        f"Logon:     {controller.logon_time}",
    ]
    if controller.text_atis:
        lines += ["", "ATIS:"]
        lines += [f"  {line}" for line in controller.text_atis]
    return lines


def detail_markup(row: SelectedRow, snapshot: Snapshot) -> str:
    """Rich markup for the popup body; entity text is escaped."""
    body = "\n".join(escape(line) for line in detail_lines(row, snapshot))
    return f"[b]{escape(detail_title(row))}[/b]\n\n{body}"
