"""Path parameter types shared by the routers."""

from typing import Annotated

from fastapi import Path

from src.taskboard.schemas import MAX_ROW_ID

ProjectId = Annotated[int, Path(gt=0, le=MAX_ROW_ID, description="Project ID")]
TaskId = Annotated[int, Path(gt=0, le=MAX_ROW_ID, description="Task ID")]
UserId = Annotated[int, Path(gt=0, le=MAX_ROW_ID, description="User ID")]
