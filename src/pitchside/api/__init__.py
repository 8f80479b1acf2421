"""REST API for the pitchside lineup manager."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Sequence, Type, TypeVar

from fastapi import Body, FastAPI, HTTPException, Query, Response
from pydantic import BaseModel, ValidationError

from pitchside.api.schemas import (
    AssignRequest,
    BadgeResponse,
    BoardRequest,
    BoardResponse,
    FormationResponse,
    HierarchyEntryResponse,
    HierarchyGroupResponse,
    HierarchyResponse,
    RatingsRequest,
    RatingsResponse,
    RosterSummaryResponse,
    SharedPlayerResponse,
    ShareLinkRequest,
    ShareLinkResponse,
    ShareResponse,
    SlotLabelResponse,
    SlotResponse,
    StatsResponse,
)
from pitchside.config import DEFAULT_FORMATION, display_abbreviation, iter_formations
from pitchside.engine import LineupBoard, assign, change_formation, resolve_board, slot_candidates
from pitchside.errors import NotFoundError, RatingsUpdateError, UnknownFormation
from pitchside.models import (
    Lineup,
    LineupCreate,
    LineupUpdate,
    Player,
    PlayerCreate,
    PlayerUpdate,
    Team,
    TeamCreate,
    TeamUpdate,
)
from pitchside.persistence import MemoryStore
from pitchside.presentation import (
    HierarchyEntry,
    RosterHierarchy,
    build_hierarchy,
    build_share_view,
    decode_share_assignment,
    encode_share_query,
)
from pitchside.ratings import format_rating, submit_ratings
from pitchside.settings import Settings, load_settings


logger = logging.getLogger("uvicorn.error")

_M = TypeVar("_M", bound=BaseModel)


def _validate(model: Type[_M], payload: Any, entity: str) -> _M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=400,
            detail={
                "message": f"Invalid {entity} data",
                "errors": exc.errors(include_url=False, include_context=False, include_input=False),
            },
        ) from exc


def _found(entity: Optional[_M], label: str) -> _M:
    if entity is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return entity


def _board_to_response(
    board: LineupBoard,
    team: Optional[Team],
    assignment: Mapping[str, str],
    roster: Sequence[Player],
) -> BoardResponse:
    return BoardResponse(
        formation=board.formation,
        team_id=team.id if team else None,
        assignment=dict(assignment),
        slots=[
            SlotResponse(
                slot=view.slot,
                abbreviation=view.abbreviation,
                player=view.player,
                is_captain=view.is_captain,
                is_motm=view.is_motm,
            )
            for view in board.slots
        ],
        occupied_slots=board.occupied_slots,
        empty_slots=board.empty_slots,
        bench=list(board.bench),
        candidates={
            view.slot: [player.id for player in slot_candidates(roster, assignment, view.slot)]
            for view in board.slots
        },
        stats=StatsResponse(
            starters=board.stats.starters,
            bench=board.stats.bench,
            absent=board.stats.absent,
        ),
    )


def _entry_to_response(entry: HierarchyEntry) -> HierarchyEntryResponse:
    return HierarchyEntryResponse(
        player=entry.player,
        entry_number=entry.entry_number,
        number=entry.number,
        position_label=entry.position_label,
        badge=BadgeResponse(kind=entry.badge.kind, label=entry.badge.label),
    )


def _hierarchy_to_response(hierarchy: RosterHierarchy, team: Optional[Team]) -> HierarchyResponse:
    summary = hierarchy.summary
    return HierarchyResponse(
        team_id=team.id if team else None,
        groups=[
            HierarchyGroupResponse(
                category=group.category,
                size=group.size,
                left=[_entry_to_response(entry) for entry in group.sides["left"]],
                center=[_entry_to_response(entry) for entry in group.sides["center"]],
                right=[_entry_to_response(entry) for entry in group.sides["right"]],
            )
            for group in hierarchy.groups
        ],
        summary=RosterSummaryResponse(
            total=summary.total,
            available=summary.available,
            absent=summary.absent,
            injured=summary.injured,
            suspended=summary.suspended,
        ),
    )


def _parse_assignment(raw: Optional[str]) -> dict[str, str]:
    try:
        return decode_share_assignment(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def create_app(store: MemoryStore | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    store = store or MemoryStore(settings)
    app = FastAPI(title="pitchside lineup manager")
    app.state.store = store
    app.state.settings = settings

    def resolve_team(team_id: Optional[str]) -> Optional[Team]:
        if team_id:
            return _found(store.get_team(team_id), "Team")
        return store.current_team()

    def board_for(request: BoardRequest) -> BoardResponse:
        team = resolve_team(request.team_id)
        formation = request.formation or (team.formation if team else DEFAULT_FORMATION)
        roster = store.list_players()
        try:
            board = resolve_board(formation, roster, team, request.assignment)
        except UnknownFormation as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _board_to_response(board, team, request.assignment, roster)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/formations", response_model=list[FormationResponse])
    async def list_formations():
        return [
            FormationResponse(
                key=formation.key,
                slots=[
                    SlotLabelResponse(slot=slot, abbreviation=display_abbreviation(slot))
                    for slot in formation.slots
                ],
            )
            for formation in iter_formations()
        ]

    def register_crud(
        path: str,
        label: str,
        response_model: Type[BaseModel],
        create_model: Type[BaseModel],
        update_model: Type[BaseModel],
        getter: Callable[[str], Any],
        creator: Callable[[Any], Any],
        updater: Callable[[str, Any], Any],
        deleter: Callable[[str], bool],
    ) -> None:
        entity = label.lower()

        @app.get(f"{path}/{{item_id}}", response_model=response_model, name=f"get_{entity}")
        async def get_item(item_id: str):
            return _found(getter(item_id), label)

        @app.post(path, response_model=response_model, status_code=201, name=f"create_{entity}")
        async def create_item(payload: Any = Body(...)):
            return creator(_validate(create_model, payload, entity))

        @app.put(f"{path}/{{item_id}}", response_model=response_model, name=f"update_{entity}")
        async def update_item(item_id: str, payload: Any = Body(...)):
            data = _validate(update_model, payload, entity)
            return _found(updater(item_id, data), label)

        @app.delete(f"{path}/{{item_id}}", status_code=204, name=f"delete_{entity}")
        async def delete_item(item_id: str):
            if not deleter(item_id):
                raise HTTPException(status_code=404, detail=f"{label} not found")
            return Response(status_code=204)

    @app.get("/api/players", response_model=list[Player])
    async def list_players():
        return store.list_players()

    @app.get("/api/teams", response_model=list[Team])
    async def list_teams():
        return store.list_teams()

    @app.get("/api/lineups", response_model=list[Lineup])
    async def list_lineups(team_id: str | None = Query(None, alias="teamId")):
        return store.list_lineups(team_id)

    register_crud(
        "/api/players", "Player", Player, PlayerCreate, PlayerUpdate,
        store.get_player, store.create_player, store.update_player, store.delete_player,
    )
    register_crud(
        "/api/teams", "Team", Team, TeamCreate, TeamUpdate,
        store.get_team, store.create_team, store.update_team, store.delete_team,
    )
    register_crud(
        "/api/lineups", "Lineup", Lineup, LineupCreate, LineupUpdate,
        store.get_lineup, store.create_lineup, store.update_lineup, store.delete_lineup,
    )

    @app.put("/api/teams/{team_id}/formation", response_model=Team)
    async def update_team_formation(team_id: str, formation: str = Body(..., embed=True)):
        try:
            team = change_formation(store, team_id, formation)
        except UnknownFormation as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _found(team, "Team")

    @app.post("/api/board", response_model=BoardResponse)
    async def board(request: BoardRequest):
        return board_for(request)

    @app.post("/api/board/assign", response_model=BoardResponse)
    async def board_assign(request: AssignRequest):
        updated = assign(request.assignment, request.slot, request.player_id)
        return board_for(request.model_copy(update={"assignment": updated}))

    @app.get("/api/hierarchy", response_model=HierarchyResponse)
    async def hierarchy(
        team_id: str | None = Query(None, alias="teamId"),
        lineup: str | None = Query(None),
    ):
        team = resolve_team(team_id)
        assignment = _parse_assignment(lineup)
        return _hierarchy_to_response(build_hierarchy(store.list_players(), team, assignment), team)

    @app.get("/api/share", response_model=ShareResponse)
    async def share(
        team: str | None = Query(None),
        formation: str | None = Query(None),
        lineup: str | None = Query(None),
    ):
        roster = store.list_players()
        try:
            view = build_share_view(roster, store.list_teams(), team, formation, lineup)
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail="Team not found") from exc
        except UnknownFormation as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ShareResponse(
            team_id=view.team.id,
            team_name=view.team.name,
            coach=view.team.coach,
            formation=view.formation,
            board=_board_to_response(view.board, view.team, view.assignment, roster),
            groups={
                category: [
                    SharedPlayerResponse(
                        player=shared.player,
                        slot=shared.slot,
                        label=shared.label,
                        number=shared.number,
                    )
                    for shared in entries
                ]
                for category, entries in view.groups.items()
            },
            counts=view.counts,
        )

    @app.post("/api/share/link", response_model=ShareLinkResponse)
    async def share_link(request: ShareLinkRequest):
        if request.team_id is None:
            current = store.current_team()
            team_id = current.id if current else None
        else:
            team_id = request.team_id
        query = encode_share_query(team_id, request.formation, request.assignment)
        return ShareLinkResponse(query=query, path=f"/share?{query}")

    @app.post("/api/ratings", response_model=RatingsResponse)
    async def ratings(request: RatingsRequest):
        try:
            updated = submit_ratings(store, request.ratings)
        except RatingsUpdateError as exc:
            raise HTTPException(
                status_code=422,
                detail={
                    "message": "Some ratings could not be saved",
                    "failures": exc.failures,
                    "updated": [player.id for player in exc.updated],
                },
            ) from exc
        return RatingsResponse(
            updated=updated,
            display={player.id: format_rating(player.rating) for player in updated},
        )

    logger.info("pitchside app ready with %d team(s)", len(store.list_teams()))
    return app


__all__ = ["create_app"]
