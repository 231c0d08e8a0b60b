"""User registration — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.shared.errors import AlreadyRegistered
from marketplace.user.profile import Role, UserProfile
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="UserProfile")
class RegisterUser:
    """Bind the calling party to a username and a role."""

    caller_id: Identifier(required=True)
    username: String(required=True, max_length=100)
    role: String(required=True, choices=Role)


@marketplace.command_handler(part_of=UserProfile)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(UserProfile)
        try:
            repo.get(command.caller_id)
        except ObjectNotFoundError:
            profile = UserProfile.register(
                party_id=command.caller_id,
                username=command.username,
                role=command.role,
            )
            repo.add(profile)
            logger.info("User registered", party_id=str(command.caller_id), role=command.role)
            return profile

        logger.info("Duplicate registration rejected", party_id=str(command.caller_id))
        raise AlreadyRegistered({"party_id": [f"Party `{command.caller_id}` is already registered"]})
