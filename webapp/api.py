from fastapi import APIRouter, Depends, File, Response, UploadFile
import constants
from file_io import decode_upload, parse_members_csv
from logging_config import get_logger
from models import Member, Event
from reminders import dashboard
from reports import attendance_summary, export_attendance_report, sort_events_by_date
from store import MemberStore
from webapp import __version__ as VERSION
from webapp.schemas import AttendanceIn, EventIn, EventUpdate, MemberIn

api = APIRouter(prefix="/api", tags=["api"])
import_logger = get_logger("import", "import", use_size_rotation=True, console_output=False)

# The application owns a single store; handlers receive it through get_store
STORE = MemberStore()
if constants.LOAD_SAMPLE_DATA:
	STORE.load_sample_data()


def get_store() -> MemberStore:
	return STORE


@api.get("/health")
def health():
	return {"status": "ok"}


@api.get("/version")
def version():
	return {"version": VERSION}


# -----------------------
# Members
# -----------------------

@api.get("/members")
def api_get_members(q: str = "", store: MemberStore = Depends(get_store)):
	return {"members": [m.to_dict() for m in store.search_members(q)]}


@api.get("/members/{member_id}")
def api_get_member(member_id: str, store: MemberStore = Depends(get_store)):
	return store.get_member(member_id).to_dict()


@api.post("/members", status_code=201)
def api_add_member(body: MemberIn, store: MemberStore = Depends(get_store)):
	return store.add_member(body.model_dump()).to_dict()


@api.put("/members/{member_id}")
def api_update_member(member_id: str, body: MemberIn, store: MemberStore = Depends(get_store)):
	member = Member(id=member_id, **body.model_dump())
	return store.update_member(member).to_dict()


@api.delete("/members/{member_id}", status_code=204)
def api_delete_member(member_id: str, store: MemberStore = Depends(get_store)):
	store.delete_member(member_id)
	return Response(status_code=204)


@api.post("/members/import", status_code=201)
async def api_import_members(file: UploadFile = File(...), store: MemberStore = Depends(get_store)):
	# the upload read is the only await; parsing and insert run to completion after it
	content = await file.read()
	records = parse_members_csv(decode_upload(content))
	added = store.bulk_add_members(records)
	import_logger.info(f"Imported {len(added)} member(s) from upload {file.filename}")
	return {"imported": len(added), "members": [m.to_dict() for m in added]}


# -----------------------
# Events
# -----------------------

@api.get("/events")
def api_get_events(store: MemberStore = Depends(get_store)):
	return {"events": [e.to_dict() for e in store.events]}


@api.get("/events/{event_id}")
def api_get_event(event_id: str, store: MemberStore = Depends(get_store)):
	return store.get_event(event_id).to_dict()


@api.post("/events", status_code=201)
def api_add_event(body: EventIn, store: MemberStore = Depends(get_store)):
	return store.add_event(body.model_dump()).to_dict()


@api.put("/events/{event_id}")
def api_update_event(event_id: str, body: EventUpdate, store: MemberStore = Depends(get_store)):
	event = Event(id=event_id, **body.model_dump())
	return store.update_event(event).to_dict()


@api.delete("/events/{event_id}", status_code=204)
def api_delete_event(event_id: str, store: MemberStore = Depends(get_store)):
	store.delete_event(event_id)
	return Response(status_code=204)


@api.put("/events/{event_id}/attendance")
def api_set_attendance(event_id: str, body: AttendanceIn, store: MemberStore = Depends(get_store)):
	return store.set_attendance(event_id, body.member_ids).to_dict()


@api.post("/events/{event_id}/attendance/{member_id}")
def api_toggle_attendance(event_id: str, member_id: str, store: MemberStore = Depends(get_store)):
	present = store.toggle_attendance(event_id, member_id)
	return {"event_id": event_id, "member_id": member_id, "present": present}


# -----------------------
# Dashboard and reports
# -----------------------

@api.get("/dashboard")
def api_dashboard(store: MemberStore = Depends(get_store)):
	return dashboard(store.members, store.events)


@api.get("/reports/attendance")
def api_attendance_report(store: MemberStore = Depends(get_store)):
	events = sort_events_by_date(store.events)
	return {
		"events": [e.to_dict() for e in events],
		"members": [row.to_dict() for row in attendance_summary(store.members, events)],
	}


@api.get("/reports/attendance.xlsx")
def api_export_attendance(store: MemberStore = Depends(get_store)):
	content = export_attendance_report(store.members, store.events)
	return Response(
		content=content,
		media_type=constants.REPORT_MIME_TYPE,
		headers={"Content-Disposition": f'attachment; filename="{constants.REPORT_FILENAME}"'},
	)
