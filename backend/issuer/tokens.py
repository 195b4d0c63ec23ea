"""Signed Twilio Video access tokens."""

from twilio.jwt.access_token import AccessToken
from twilio.jwt.access_token.grants import VideoGrant

from issuer.config import MAX_ALLOWED_SESSION_DURATION, IssuerConfig


def mint_access_token(config: IssuerConfig, identity: str, room_name: str | None) -> str:
    """Sign an access token that lets identity join room_name.

    Args:
        config: Deployment configuration with the API key to sign with.
        identity: Participant identity.
        room_name: Room the single video grant is scoped to.

    Returns:
        Serialized JWT valid for MAX_ALLOWED_SESSION_DURATION seconds.
    """
    token = AccessToken(
        config.account_sid,
        config.api_key_sid,
        config.api_key_secret,
        identity=identity,
        ttl=MAX_ALLOWED_SESSION_DURATION,
    )
    token.add_grant(VideoGrant(room=room_name))
    return token.to_jwt()
