"""Base services container for dependency injection."""

from config import Config


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a different category source for testing.

    Args:
        config: Application configuration object.
        category_service: Optional category service. If provided, the
                          configured categories file is ignored.
    """

    def __init__(self, config: Config, category_service=None):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
            category_service: Optional category service for dependency injection
                              (testing). If None, reads config.categories_file.
        """
        self.config = config

        # Lazy import to avoid circular dependencies
        from services.categories import CategoryService
        from services.transactions import TransactionService

        self.categories = category_service or CategoryService(config.categories_file)
        self.transactions = TransactionService(
            self.categories, config.default_category_name
        )
