import pytest
from sqlalchemy.exc import NoResultFound

from app.models.image import Image
from app.schemas.criteria import ImageCriteria
from app.schemas.image import ImageDTO, ImageSize
from app.schemas.pagination import PageRequest, SortOrder
from app.service.IO.image_query_service import ImageQueryService
from app.service.IO.image_service import ImageService


def make_dto(name, **kwargs):
    return ImageDTO(name=name, large=b"L", large_content_type="image/png", **kwargs)


@pytest.mark.asyncio
async def test_save_find_delete_flow(db_session):
    svc = ImageService(db_session)

    saved = await svc.save(make_dto("first", hash="abc123"))
    assert saved.id is not None
    assert saved.large == b"L"

    fetched = await svc.find_one(saved.id)
    assert fetched == saved

    by_name = await svc.get_image_by_name("first")
    assert by_name.id == saved.id

    await svc.delete(saved.id)
    assert await svc.find_one(saved.id) is None
    # повторное удаление не падает
    await svc.delete(saved.id)

@pytest.mark.asyncio
async def test_save_updates_existing(db_session):
    svc = ImageService(db_session)
    saved = await svc.save(make_dto("to-update"))

    updated = await svc.save(saved.model_copy(update={"medium": b"M", "medium_content_type": "image/jpeg"}))

    assert updated.id == saved.id
    image = await svc.get_image_by_id(saved.id)
    assert image.medium == b"M"
    assert image.medium_content_type == "image/jpeg"

@pytest.mark.asyncio
async def test_save_unknown_id_raises_store_error(db_session):
    svc = ImageService(db_session)

    with pytest.raises(NoResultFound):
        await svc.save(make_dto("ghost", id=4242))

@pytest.mark.asyncio
async def test_find_missing_returns_none(db_session):
    svc = ImageService(db_session)

    assert await svc.find_one(1) is None
    assert await svc.get_image_by_name("nope") is None

@pytest.mark.asyncio
async def test_get_image_variant_dispatch(db_session, sample_image):
    assert ImageService.get_image_variant(sample_image, ImageSize.LARGE) == (bytes.fromhex("AABB"), "image/png")
    assert ImageService.get_image_variant(sample_image, ImageSize.MEDIUM) == (bytes.fromhex("CC"), "image/jpeg")
    assert ImageService.get_image_variant(sample_image, ImageSize.SMALL) == (b"", None)

@pytest.mark.asyncio
async def test_query_service_filters_and_counts(db_session):
    svc = ImageService(db_session)
    for name, hash_value in (("avatar-red", "r"), ("avatar-blue", None), ("badge", "b")):
        await svc.save(make_dto(name, hash=hash_value))
    query_service = ImageQueryService(db_session)

    criteria = ImageCriteria.from_query_params([("name.contains", "avatar")])
    page = await query_service.find_by_criteria(criteria, PageRequest(sort=[SortOrder.parse("name,asc")]))
    assert [image.name for image in page.items] == ["avatar-blue", "avatar-red"]
    assert page.total == 2

    with_hash = ImageCriteria.from_query_params([("hash.specified", "true")])
    assert await query_service.count_by_criteria(with_hash) == 2

    nothing = ImageCriteria.from_query_params([("name.equals", "missing")])
    assert await query_service.count_by_criteria(nothing) == 0

    everything = ImageCriteria()
    assert await query_service.count_by_criteria(everything) == 3

@pytest.mark.asyncio
async def test_query_service_contains_escapes_wildcards(db_session):
    svc = ImageService(db_session)
    await svc.save(make_dto("100%_done"))
    await svc.save(make_dto("100 done"))
    query_service = ImageQueryService(db_session)

    criteria = ImageCriteria.from_query_params([("name.contains", "%_")])
    assert await query_service.count_by_criteria(criteria) == 1

@pytest.mark.asyncio
async def test_query_service_pages_without_criteria(db_session):
    svc = ImageService(db_session)
    for i in range(5):
        await svc.save(make_dto(f"page-{i}"))

    page = await ImageQueryService(db_session).find_by_criteria(ImageCriteria(), PageRequest(page=2, size=2))

    assert page.total == 5
    assert page.total_pages == 3
    assert [image.name for image in page.items] == ["page-4"]
