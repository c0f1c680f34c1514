from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        DATASET = "dataset-store"

    class Control:
        # Upload
        UPLOAD = "csv-upload"
        UPLOAD_STATUS = "csv-upload-status"

        # Chart selectors
        CONTROLS_CONTAINER = "chart-controls-container"
        CHART_TYPE_SELECT = "chart-type-select"
        X_FIELD_SELECT = "x-field-select"
        Y_FIELD_SELECT = "y-field-select"

        # Graph
        MAIN_GRAPH = "main-graph"

        # Preview + full view
        DATA_SECTION = "data-section"
        PREVIEW_TITLE = "preview-title"
        PREVIEW_TABLE = "preview-table"
        VIEW_ALL_BTN = "view-all-btn"
        FULL_DATA_MODAL = "full-data-modal"
        FULL_DATA_TABLE = "full-data-table"
        FULL_DATA_CLOSE_BTN = "full-data-close-btn"
