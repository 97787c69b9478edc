"""Initialize BlastPointsSession components."""

from ..authentication import AuthenticationHelper
from ..balance_operations import BalanceOperations
from ..history_operations import HistoryOperations
from ..request_builder import RequestBuilder
from ..session_manager import SessionManager
from ..token_manager import TokenManager
from ..transfer_operations import TransferOperations


class ComponentInitializer:
    """Initialize all helper components for BlastPointsSession."""

    def __init__(self, config, clock):
        """Initialize with config and the clock used for token expiry."""
        self.config = config
        self.clock = clock

    def initialize(self, contract_address: str, operator_account):
        """Initialize all helper components."""
        session_manager = SessionManager(self.config)
        request_builder = RequestBuilder(self.config.base_url, session_manager)
        auth_helper = AuthenticationHelper(contract_address, operator_account, request_builder)
        token_manager = TokenManager(auth_helper.fetch_bearer_token, clock=self.clock)
        request_builder.attach_token_manager(token_manager)

        return {
            "session_manager": session_manager,
            "request_builder": request_builder,
            "auth_helper": auth_helper,
            "token_manager": token_manager,
            "balance_ops": BalanceOperations(request_builder, contract_address),
            "transfer_ops": TransferOperations(request_builder, contract_address),
            "history_ops": HistoryOperations(request_builder, contract_address),
        }
