"""Share link and QR derivation for albums."""

from io import BytesIO

import qrcode

from memory_album.domain.errors import ValidationFailed
from memory_album.domain.share import ShareArtifact

PUBLIC_ROUTE = "#/a/"
DEFAULT_SHARE_TEMPLATE = (
    "✨ I made a memory album for you:\n{link}\n\n"
    "Tell me which photo made you happiest 💛"
)


def derive_share(base_location: str, slug: str) -> ShareArtifact:
    """Derive the public link and QR payload for an album slug."""
    if not slug:
        raise ValidationFailed("Slug is required to share an album")
    base = base_location.split("#", maxsplit=1)[0]
    public_url = f"{base}{PUBLIC_ROUTE}{slug}"
    return ShareArtifact(public_url=public_url, qr_payload=public_url.encode("utf-8"))


def share_message(artifact: ShareArtifact, template: str = DEFAULT_SHARE_TEMPLATE) -> str:
    """Wrap the public link in the friendly copy text."""
    return template.format(link=artifact.public_url)


def render_qr_png(artifact: ShareArtifact) -> bytes:
    """Render the artifact's QR payload as a PNG image."""
    qr = qrcode.QRCode(box_size=6, border=1)
    qr.add_data(artifact.qr_payload)
    qr.make(fit=True)
    image = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
