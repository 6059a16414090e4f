from fastapi import APIRouter
from app.api.endpoints.image import create_image, update_image,\
get_images, get_image_content, get_image, remove_image


router = APIRouter()

# /count и /name/{name} регистрируются раньше /{image_id}
router.include_router(create_image.router, prefix="/images", tags=["image"])
router.include_router(update_image.router, prefix="/images", tags=["image"])
router.include_router(get_images.router, prefix="/images", tags=["image"])
router.include_router(get_image_content.router, prefix="/images", tags=["image"])
router.include_router(get_image.router, prefix="/images", tags=["image"])
router.include_router(remove_image.router, prefix="/images", tags=["image"])
