from infrastructure.api import VideoApiClient
from infrastructure.downloader_strategy import MediaDownloader
from infrastructure.downloading import ContentFetcherImpl
from infrastructure.logging import ConsoleLogger
from infrastructure.localization import i18n
from application.video_search_service import VideoSearchService
from config import default_config


def create_services(config=default_config):
    """Creates and wires all application services"""
    logger = ConsoleLogger()
    i18n.load_language(config.ui_language)

    api_client = VideoApiClient(config.api_base_url, timeout=config.request_timeout)
    downloader = MediaDownloader(config.media_cache_dir)
    fetcher = ContentFetcherImpl(downloader, logger=logger)
    search_service = VideoSearchService(
        api_client,
        logger=logger,
        top_k=config.search_top_k,
        include_frame=config.include_frame,
    )

    return {
        'catalog': api_client,
        'search_service': search_service,
        'fetcher': fetcher,
        'downloader': downloader,
        'logger': logger,
    }


def main():
    """Application entry point"""
    from presentation.app import App

    services = create_services()
    app = App(
        catalog=services['catalog'],
        search_service=services['search_service'],
        fetcher=services['fetcher'],
        logger=services['logger'],
        duration_tolerance=default_config.duration_tolerance,
    )
    try:
        app.mainloop()
    finally:
        services['downloader'].clear()


if __name__ == "__main__":
    main()
