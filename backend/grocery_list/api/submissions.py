"""
Grocery form endpoints.

The form the replay step fills in: one POST per grocery item.
"""

from fastapi import APIRouter, HTTPException, Request

from grocery_list.models.grocery import FormSubmission, SubmissionResponse

router = APIRouter(prefix="/api/submissions", tags=["submissions"])


@router.post("", response_model=SubmissionResponse, status_code=201)
async def submit_form(request: Request, body: FormSubmission) -> SubmissionResponse:
    """Accept one filled-in grocery form."""
    if not body.category.strip() or not body.item.strip():
        raise HTTPException(status_code=400, detail="Category and item are required")

    store = request.app.state.submission_store
    stored = store.add(body)
    return SubmissionResponse(
        success=True,
        message="Submission Successful",
        submission=stored,
    )


@router.get("", response_model=list[FormSubmission])
async def list_submissions(request: Request) -> list[FormSubmission]:
    """All submissions received so far, oldest first."""
    return request.app.state.submission_store.items()


@router.delete("")
async def clear_submissions(request: Request) -> dict:
    """Forget all received submissions."""
    removed = request.app.state.submission_store.clear()
    return {"success": True, "removed": removed}
