from html import escape
from typing import Dict, List

from hackadmin.utils.status_colors import get_status_color, is_dark_color

SCHOOL_COLORS = ["#2563eb", "#059669", "#7c3aed", "#d97706", "#e11d48"]


def initials(name: str) -> str:
    """First letter of the first two words, upper-cased."""
    return "".join(word[0] for word in name.split()[:2]).upper()


def top_schools(schools: List[Dict]) -> List[Dict]:
    """Display rows for the top schools card."""
    return [
        {
            "university": school["university"],
            "count": school["count"],
            "initials": initials(school["university"]),
            "color": SCHOOL_COLORS[index % len(SCHOOL_COLORS)],
        }
        for index, school in enumerate(schools)
    ]


def status_badge(status: str) -> Dict[str, str]:
    background = get_status_color(status)
    return {
        "label": status,
        "backgroundColor": background,
        "textColor": "#ffffff" if is_dark_color(background) else "#000000",
    }


def render_status_badge(status: str) -> str:
    badge = status_badge(status)
    return (
        f'<span class="badge" style="background:{badge["backgroundColor"]};'
        f'color:{badge["textColor"]}">{escape(badge["label"])}</span>'
    )


def render_top_schools(schools: List[Dict]) -> str:
    rows = [
        f'<div class="school"><span class="avatar" style="background:{row["color"]}">'
        f'{escape(row["initials"])}</span><span class="name">{escape(row["university"])}</span>'
        f'<span class="count">{row["count"]:,}</span></div>'
        for row in top_schools(schools)
    ]
    return "\n".join(rows) or '<p class="muted">No applications yet.</p>'
