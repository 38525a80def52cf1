import logging
from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from hackadmin.api.deps import get_store
from hackadmin.db.store import DocumentStore
from hackadmin.services.stats import StatsService
from hackadmin.utils.widgets import render_status_badge, render_top_schools

router = APIRouter()
logger = logging.getLogger(__name__)

PAGE_STYLE = """
    body { font-family: Arial, sans-serif; padding: 40px; background: #0a0a0f; color: white; }
    .container { max-width: 960px; margin: 0 auto; }
    h1 { color: #6366f1; }
    .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 20px; }
    .card { background: rgba(255,255,255,0.05); padding: 20px; border-radius: 10px; margin: 20px 0; }
    .stat { font-size: 32px; font-weight: bold; }
    .badge { display: inline-block; padding: 2px 10px; border-radius: 999px; font-size: 12px; margin-right: 8px; }
    .school { display: flex; align-items: center; gap: 12px; margin: 8px 0; }
    .avatar { width: 36px; height: 36px; border-radius: 50%; display: flex; align-items: center;
              justify-content: center; font-size: 12px; font-weight: bold; }
    .school .name { flex: 1; }
    .muted { color: rgba(255,255,255,0.5); }
    .login-box { max-width: 400px; margin: 100px auto; background: rgba(255,255,255,0.05); padding: 40px; border-radius: 10px; }
    input { width: 100%; padding: 10px; margin: 10px 0; background: rgba(255,255,255,0.1);
            border: 1px solid rgba(255,255,255,0.2); color: white; border-radius: 5px; }
    button { width: 100%; padding: 12px; background: #6366f1; color: white; border: none; border-radius: 5px; cursor: pointer; margin-top: 20px; }
"""


def page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
    <title>{escape(title)}</title>
    <style>{PAGE_STYLE}</style>
</head>
<body>
{body}
</body>
</html>"""


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(store: DocumentStore = Depends(get_store)):
    """Overview page: headline numbers, status breakdown and top schools"""
    try:
        stats = StatsService(store).dashboard()
    except Exception as e:
        logger.error(f"❌ Dashboard statistics failed: {e}")
        return HTMLResponse(page("Dashboard", '<div class="container"><h1>Dashboard</h1>'
                                 '<p class="muted">Statistics are unavailable right now.</p></div>'),
                            status_code=500)

    headline = [
        ("Total applicants", stats["totalApplicants"]),
        ("New in last 24h", stats["newApplicantsLast24Hours"]),
        ("This week", stats["weeklyApplicants"]),
        ("Teams", stats["totalTeams"]),
        ("Unassigned", stats["unassignedApplications"]),
    ]
    cards = "\n".join(
        f'<div class="card"><div class="muted">{label}</div><div class="stat">{value:,}</div></div>'
        for label, value in headline
    )
    statuses = "\n".join(
        f"<div>{render_status_badge(name)}{count:,}</div>"
        for name, count in stats["statusCounts"].items()
    )

    body = f"""
    <div class="container">
        <h1>Dashboard</h1>
        <div class="grid">{cards}</div>
        <div class="grid">
            <div class="card"><h3>Application status</h3>{statuses}</div>
            <div class="card"><h3>Top schools</h3>{render_top_schools(stats["topUniversities"])}</div>
        </div>
        <button onclick="fetch('/auth-token/logout', {{method: 'POST'}}).then(() => window.location.href = '/auth/v1/login')">
            Log out
        </button>
    </div>
    """
    return HTMLResponse(page("Dashboard", body))


@router.get("/auth/v1/login", response_class=HTMLResponse)
def login_page():
    """Serve the admin login page"""
    return HTMLResponse(page("Admin Login", """
    <div class="login-box">
        <h2>Admin Login</h2>
        <p>Enter your admin credentials to access the dashboard.</p>
        <form onsubmit="login(event)">
            <input type="email" id="email" placeholder="Admin Email" required>
            <input type="password" id="password" placeholder="Password" required>
            <label><input type="checkbox" id="remember" style="width:auto"> Remember me for 30 days</label>
            <button type="submit">Login</button>
        </form>
    </div>
    <script>
        async function login(e) {
            e.preventDefault();
            const response = await fetch('/auth-token/login', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({
                    email: document.getElementById('email').value,
                    password: document.getElementById('password').value,
                    remember: document.getElementById('remember').checked
                })
            });

            if (response.ok) {
                window.location.href = '/dashboard';
            } else {
                alert('Login failed. Please check your credentials.');
            }
        }
    </script>
    """))
