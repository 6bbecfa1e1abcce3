from __future__ import annotations

import json

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, model_validator

from ...application.controller import normalize_tree_count, parse_tree_count
from ...core.errors import InvalidArgument, InvalidState
from ...core.settings import QuizSettings
from .schemas import GuessPayload, RoundPayload, SummaryPayload
from .service import SessionConfig, SessionManager

__all__ = ["CreateQuizRequest", "GuessRequest", "NewRoundRequest", "create_session_routers"]

_HX_HEADER = "HX-Request"


class _TreeCountRequest(BaseModel):
    trees: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: object) -> object:
        if not isinstance(data, dict):
            return data
        cleaned: dict[str, object] = dict(data)
        cleaned["trees"] = parse_tree_count(cleaned.get("trees"))
        return cleaned

    @model_validator(mode="after")
    def _normalize(self) -> _TreeCountRequest:
        if self.trees is not None:
            self.trees = normalize_tree_count(self.trees)
        return self


class CreateQuizRequest(_TreeCountRequest):
    pass


class NewRoundRequest(_TreeCountRequest):
    pass


class GuessRequest(BaseModel):
    guess: int


class _QuizController:
    def __init__(self, manager: SessionManager, templates: Jinja2Templates) -> None:
        self.manager = manager
        self.templates = templates

    # ------------------------------------------------------------------ helpers
    def _is_hx(self, request: Request) -> bool:
        return request.headers.get(_HX_HEADER, "").lower() == "true"

    def _json_response(self, data: dict[str, object]) -> JSONResponse:
        response = JSONResponse(data)
        response.headers.setdefault("Vary", _HX_HEADER)
        return response

    def _template_response(
        self,
        request: Request,
        template: str,
        context: dict[str, object],
        *,
        trigger: dict[str, str] | None = None,
    ) -> Response:
        headers: dict[str, str] = {"Vary": _HX_HEADER}
        if trigger:
            headers["HX-Trigger"] = json.dumps(trigger)
        return self.templates.TemplateResponse(
            request,
            template,
            {**context, "request": request},
            headers=headers,
        )

    def _round_fragment(self, request: Request, sid: str, payload: RoundPayload, *, event: str) -> Response:
        return self._template_response(
            request,
            "quiz/round.html",
            {"round": payload, "sid": sid},
            trigger={event: sid},
        )

    def _summary_fragment(self, request: Request, summary: SummaryPayload) -> Response:
        return self._template_response(request, "quiz/summary.html", {"summary": summary})

    def _round_or_404(self, sid: str) -> RoundPayload:
        try:
            return self.manager.get_round(sid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc

    # ------------------------------------------------------------------ actions
    def create(self, request: Request, body: CreateQuizRequest | None = None) -> Response:
        trees = body.trees if body is not None else None
        if trees is None:
            trees = QuizSettings.from_env().default_trees
        config = SessionConfig(trees=trees)
        session_id = self.manager.create_session(config)
        if self._is_hx(request):
            return self._round_fragment(request, session_id, self._round_or_404(session_id), event="sessionCreated")
        return self._json_response({"session": session_id})

    def current_round(self, request: Request, sid: str) -> Response:
        payload = self._round_or_404(sid)
        if self._is_hx(request):
            return self._round_fragment(request, sid, payload, event="roundStarted")
        return self._json_response(payload.to_dict())

    def new_round(self, request: Request, sid: str, body: NewRoundRequest | None = None) -> Response:
        try:
            payload = self.manager.new_round(sid, body.trees if body is not None else None)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        if self._is_hx(request):
            return self._round_fragment(request, sid, payload, event="roundStarted")
        return self._json_response(payload.to_dict())

    def guess(self, request: Request, sid: str, body: GuessRequest) -> Response:
        try:
            result: GuessPayload = self.manager.guess(sid, body.guess)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        except InvalidArgument as exc:
            raise HTTPException(400, str(exc)) from exc
        except InvalidState as exc:
            raise HTTPException(409, str(exc)) from exc
        if self._is_hx(request):
            return self._round_fragment(request, sid, self._round_or_404(sid), event="sessionUpdated")
        return self._json_response(result.to_dict())

    def summary(self, request: Request, sid: str) -> Response:
        try:
            summary = self.manager.summary(sid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        if self._is_hx(request):
            return self._summary_fragment(request, summary)
        return self._json_response(summary.to_dict())


def create_session_routers(
    manager: SessionManager,
    templates: Jinja2Templates,
) -> tuple[APIRouter, APIRouter]:
    controller = _QuizController(manager, templates)

    router_v1 = APIRouter(prefix="/api/v1/quiz", tags=["quiz"])
    router_legacy = APIRouter(prefix="/api/quiz", tags=["quiz-legacy"])

    for router in (router_v1, router_legacy):
        router.add_api_route("", controller.create, methods=["POST"])
        router.add_api_route("/{sid}/round", controller.current_round, methods=["GET"])
        router.add_api_route("/{sid}/round", controller.new_round, methods=["POST"])
        router.add_api_route("/{sid}/guess", controller.guess, methods=["POST"])
        router.add_api_route("/{sid}/summary", controller.summary, methods=["GET"])

    return router_v1, router_legacy
