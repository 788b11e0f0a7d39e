from fastapi import APIRouter, Depends, HTTPException, Response, status
from apies.links.dto import ShortenRequestDto, ShortenResponseDto
from models.errors import ResolveFailed, ShortenFailed
from services.link.link_service import LinkService
from utils.get_services import get_link_service

link_router = APIRouter()


def encode_location(url: str) -> bytes:
    """Encode `url` as a Location header value, rejecting bytes an HTTP/1.1 server refuses to send."""
    value = url.encode("utf-8")
    if not value or value != value.strip(b" \t"):
        raise ValueError(f"Location must be non-empty without surrounding whitespace: {url!r}")
    for byte in value:
        if (byte < 0x20 and byte != 0x09) or byte == 0x7F:
            raise ValueError(f"Invalid header byte {byte:#04x} in {url!r}")
    return value


@link_router.post("/", response_model=ShortenResponseDto, status_code=status.HTTP_201_CREATED)
async def shorten_link(payload: ShortenRequestDto, service: LinkService = Depends(get_link_service)):
    try:
        shortened = await service.shorten(payload.url)
    except ShortenFailed:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to shorten url")
    return ShortenResponseDto(id=shortened.id, url=shortened.short_link)


@link_router.get("/{link_id}")
async def redirect_link(link_id: str, service: LinkService = Depends(get_link_service)):
    try:
        url = await service.resolve(link_id)
    except ResolveFailed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Link not found")

    try:
        location = encode_location(url)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Stored url is not a valid Location")

    response = Response(status_code=status.HTTP_302_FOUND)
    response.raw_headers.append((b"location", location))
    return response
