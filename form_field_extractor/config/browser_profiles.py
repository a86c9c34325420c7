"""
Browser profiles for document acquisition.
Provides user agents, viewport configurations, browser arguments and
the HTTP headers shared by the browser context and the PDF downloader.
"""

from typing import Dict, List, Any


class BrowserProfiles:
    """Browser configuration profiles."""
    
    # User agents
    USER_AGENTS = {
        'desktop_chrome': (
            'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
            'AppleWebKit/537.36 (KHTML, like Gecko) '
            'Chrome/120.0.0.0 Safari/537.36'
        ),
    }
    
    # Viewport presets
    VIEWPORTS = {
        'desktop': {'width': 1920, 'height': 1080},
    }
    
    # Browser launch arguments
    BROWSER_ARGS: List[str] = [
        '--disable-dev-shm-usage',
        '--no-sandbox',
        '--disable-setuid-sandbox',
    ]
    
    @classmethod
    def get_profile(cls, profile_name: str = 'desktop_chrome') -> Dict[str, Any]:
        """
        Get a complete browser profile configuration.
        
        Args:
            profile_name: Name of the profile (unknown names fall back to desktop_chrome)
            
        Returns:
            Dictionary with user_agent, viewport, and args
        """
        return {
            'user_agent': cls.USER_AGENTS.get(profile_name, cls.USER_AGENTS['desktop_chrome']),
            'viewport': cls.VIEWPORTS['desktop'],
            'args': cls.BROWSER_ARGS,
        }
    
    @classmethod
    def get_headers(cls, accept: str = 'text/html,application/xhtml+xml,*/*;q=0.8') -> Dict[str, str]:
        """Get common HTTP headers."""
        return {
            'Accept': accept,
            'Accept-Language': 'en-US,en;q=0.9',
        }
    
    @classmethod
    def get_download_headers(cls, profile_name: str = 'desktop_chrome') -> Dict[str, str]:
        """Get headers for fetching a PDF document outside the browser."""
        headers = cls.get_headers(accept='application/pdf,*/*;q=0.8')
        headers['User-Agent'] = cls.get_profile(profile_name)['user_agent']
        return headers
