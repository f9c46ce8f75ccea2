"""
Configuration settings for the crawler
"""

from dataclasses import dataclass, field
from typing import Tuple


# Known section paths of the city website. The site publishes no sitemap,
# so these seed the frontier next to the links found on the home page.
DEFAULT_SECTION_PATHS: Tuple[str, ...] = (
    # Government
    '/government',
    '/government/boards-commissions',
    '/government/budget-financial-information',
    '/government/city-council-meetings',
    '/government/city-officials',
    '/government/city-officials/city-council',
    '/government/city-officials/city-manager',
    '/government/city-officials/city-court-judges',
    '/government/charter-code-of-ordinances',
    '/government/public-notices',
    '/government/transparency-portal',

    # Departments
    '/departments',
    '/departments/animal-control',
    '/departments/beach-maintenance',
    '/departments/beach-park',
    '/departments/building',
    '/departments/city-clerk',
    '/departments/city-comptroller',
    '/departments/city-court',
    '/departments/civil-service',
    '/departments/community-development',
    '/departments/corporation-counsel',
    '/departments/economic-development-planning',
    '/departments/emergency-management',
    '/departments/events',
    '/departments/fire',
    '/departments/ice-arena',
    '/departments/lifeguard-patrol',
    '/departments/municipal-building',
    '/departments/planning-board',
    '/departments/parks-and-recreation',
    '/departments/police-department',
    '/departments/public-relations',
    '/departments/public-works',
    '/departments/public-works/park-avenue-resilient-connectivity-project',
    '/departments/public-works/residential-water-meter-replacement-project',
    '/departments/purchasing',
    '/departments/sanitation-recycling',
    '/departments/sewer-maintenance',
    '/departments/street-maintenance',
    '/departments/tax-assessor',
    '/departments/tax-department',
    '/departments/transportation',
    '/departments/water-pollution-plant',
    '/departments/water-purification-plant',
    '/departments/water-purification-plant/drinking-water-quality-report',
    '/departments/water-sewer-administration',
    '/departments/water-transmission',
    '/departments/zoning-board-of-appeals',
    '/departments/department-listing',

    # Community
    '/community',
    '/community/accessibility',
    '/community/beach',
    '/community/building-permits',
    '/community/comprehensive-plan',
    '/community/empire-wind-project',
    '/community/genasys-alert',
    '/community/jobs',
    '/community/licenses-records-ceremonies',
    '/community/online-payments',
    '/community/parks-recreation',
    '/community/preparedness',
    '/community/public-safety',
    '/community/public-safety/police-department',
    '/community/public-safety/fire-department',
    '/community/public-safety/lifeguards',
    '/community/sanitation-recycling',
    '/community/seniors',
    '/community/superblock-engel-burman-project',
    '/community/transportation',
    '/community/school-bus-safety-program',

    # Business
    '/business',
    '/business/applying-for-a-mercantile-license',
    '/business/become-an-ocean-friendly-restaurant',
    '/business/business-resources',
    '/business/chamber-of-commerce',
    '/business/co-working-space',
    '/business/commercial-energy-rebates',
    '/business/economic-development-homepage',
    '/business/rfps-vendor-registration',
    '/business/sign-up-for-business-notifications',
    '/business/long-beach-businesses',

    # How Do I
    '/how-do-i',
    '/how-do-i/access',
    '/how-do-i/apply-for',
    '/how-do-i/contact',
    '/how-do-i/find-out-about',
    '/how-do-i/pay-for',
    '/how-do-i/sign-up-for',
    '/how-do-i/stay-connected',
    '/how-do-i/faq',

    # Explore
    '/explore',
    '/explore/welcome',
    '/explore/about',
    '/explore/history',
    '/explore/eat-play-surf-shop',
    '/explore/places-of-worship',
    '/explore/the-long-beach-chamber-of-commerce',
    '/explore/long-beach-public-library',
    '/explore/long-beach-school-district',

    # Quick Connect
    '/quick-connect/bus-schedule',
    '/quick-connect/calendar-of-events',
    '/quick-connect/transparency-portal',
    '/quick-connect/recycling',
    '/quick-connect/downloadable-forms',

    # Special pages
    '/online-payments',
    '/calendar',
    '/news',
    '/site-map',
    '/accessibility',
    '/contact-us',
)


@dataclass
class CrawlConfig:
    """Configuration class for crawler settings"""
    # Target site
    base_url: str = "https://www.longbeachny.gov"
    target_domain: str = "longbeachny.gov"
    section_paths: Tuple[str, ...] = DEFAULT_SECTION_PATHS

    # Basic crawling settings
    max_pages: int = 500
    delay: float = 2.0
    timeout: int = 30
    user_agent: str = (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
    )

    # Storage settings
    data_dir: str = "data"
    scrape_filename: str = "longbeach_complete_scrape.json"
    report_filename: str = "scraping_report.json"
    stale_after_hours: int = 24

    # URL filtering
    skip_extensions: Tuple[str, ...] = field(default_factory=lambda: (
        '.pdf', '.doc', '.docx', '.xls', '.xlsx', '.zip', '.jpg', '.png', '.gif',
    ))
    document_extensions: Tuple[str, ...] = field(default_factory=lambda: (
        '.pdf', '.doc', '.docx', '.xls', '.xlsx',
    ))

    @classmethod
    def from_settings(cls, settings) -> "CrawlConfig":
        """Build a crawler configuration from application settings"""
        return cls(
            base_url=settings.BASE_URL.rstrip('/'),
            target_domain=settings.TARGET_DOMAIN,
            max_pages=settings.MAX_PAGES,
            delay=settings.CRAWL_DELAY,
            timeout=settings.REQUEST_TIMEOUT,
            data_dir=settings.DATA_DIR,
            scrape_filename=settings.SCRAPE_FILENAME,
            report_filename=settings.REPORT_FILENAME,
            stale_after_hours=settings.STALE_AFTER_HOURS,
        )
