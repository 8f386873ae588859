from pathlib import Path
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
import utils
from models import ReminderType
from reminders import monthly_reminders, upcoming_events
from reports import attendance_matrix
from store import MemberStore
from webapp import __version__ as VERSION
from webapp.api import get_store

views = APIRouter(tags=["views"])
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["display_date"] = utils.format_display_date


@views.get("/", response_class=HTMLResponse)
def dashboard_view(request: Request, store: MemberStore = Depends(get_store)):
	today = utils.today()
	return templates.TemplateResponse(
		request,
		"dashboard.html",
		{
			"title": "Dashboard",
			"version": VERSION,
			"upcoming": upcoming_events(store.events, today),
			"reminders": [monthly_reminders(store.members, t, today) for t in ReminderType],
		},
	)


@views.get("/members", response_class=HTMLResponse)
def members_view(request: Request, q: str = "", store: MemberStore = Depends(get_store)):
	return templates.TemplateResponse(
		request,
		"members.html",
		{
			"title": "Members",
			"version": VERSION,
			"search": q,
			"members": store.search_members(q),
		},
	)


@views.get("/events", response_class=HTMLResponse)
def events_view(request: Request, store: MemberStore = Depends(get_store)):
	# newest first on the events page
	events = sorted(store.events, key=lambda e: e.date, reverse=True)
	return templates.TemplateResponse(
		request,
		"events.html",
		{
			"title": "Events",
			"version": VERSION,
			"events": events,
			"member_count": len(store.members),
		},
	)


@views.get("/reports", response_class=HTMLResponse)
def reports_view(request: Request, store: MemberStore = Depends(get_store)):
	events, rows = attendance_matrix(store.members, store.events)
	return templates.TemplateResponse(
		request,
		"reports.html",
		{
			"title": "Attendance Report",
			"version": VERSION,
			"events": events,
			"rows": rows,
		},
	)
