"""HTTP trigger blueprint — feed, image proxy, profile and health endpoints."""

import json
import logging
from typing import Any

import azure.functions as func

from photo_feed import __version__
from photo_feed.config import load_config
from photo_feed.imaging.transcoder import WEBP_MIME_TYPE
from photo_feed.orchestration.feed import NotFoundError, feed_service_from_config
from photo_feed.orchestration.image_proxy import image_proxy_from_config
from photo_feed.photos.profile import profile_from_config

logger = logging.getLogger(__name__)

bp = func.Blueprint()

IMAGE_CACHE_CONTROL = "public, max-age=31536000, immutable"
NO_STORE = "no-store"


def _json_response(payload: dict[str, Any], status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(payload),
        status_code=status_code,
        mimetype="application/json",
        headers={"Cache-Control": NO_STORE},
    )


@bp.route(route="health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint. Returns service status and version."""
    logger.info("[health_check] health check requested")
    return _json_response({"status": "ok", "version": __version__})


@bp.route(route="photos", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_photos(req: func.HttpRequest) -> func.HttpResponse:
    """Feed endpoint — the configured folder's images grouped into posts.

    Responds 400 when no folder name is configured, 404 when the folder does
    not exist and 500 for any other failure.
    """
    logger.info("[get_photos] feed requested")

    try:
        config = load_config()
        if not config.folder_name:
            logger.warning("[get_photos] folder name not configured")
            return _json_response({"error": "PF_FOLDER_NAME not configured"}, status_code=400)

        feed = feed_service_from_config(config).build_feed()
        logger.info(
            "[get_photos] feed built; post_count:%d;total_photos:%d",
            len(feed.posts),
            feed.total_photos,
        )
        return _json_response(feed.to_dict())

    except NotFoundError as exc:
        logger.warning("[get_photos] folder not found; folder_name:%s", exc.folder_name)
        return _json_response({"error": str(exc)}, status_code=404)

    except Exception as exc:
        logger.error("[get_photos] feed request failed", exc_info=True)
        return _json_response(
            {"error": "Failed to fetch photos", "details": str(exc)}, status_code=500
        )


@bp.route(route="image", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_image(req: func.HttpRequest) -> func.HttpResponse:
    """Image proxy endpoint — one drive item re-encoded as WebP.

    Successful responses are marked immutable since an item ID always maps
    to the same bytes.
    """
    image_id = req.params.get("id")
    if not image_id:
        return _json_response({"error": "Image ID is required"}, status_code=400)

    logger.info("[get_image] image requested; image_id:%s", image_id)

    try:
        config = load_config()
        body = image_proxy_from_config(config).fetch_webp(image_id)
        return func.HttpResponse(
            body,
            status_code=200,
            mimetype=WEBP_MIME_TYPE,
            headers={"Cache-Control": IMAGE_CACHE_CONTROL},
        )

    except Exception:
        logger.error("[get_image] image request failed; image_id:%s", image_id, exc_info=True)
        return _json_response({"error": "Failed to fetch image"}, status_code=500)


@bp.route(route="profile", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_profile(req: func.HttpRequest) -> func.HttpResponse:
    """Sidebar data: the current user and the suggested users."""
    logger.info("[get_profile] profile requested")

    try:
        profile = profile_from_config(load_config())
        return _json_response(profile.to_dict())

    except Exception:
        logger.error("[get_profile] profile request failed", exc_info=True)
        return _json_response({"error": "Failed to load profile"}, status_code=500)
