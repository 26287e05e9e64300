"""
Sample data fixtures for testing.
"""

# archlinux.org/packages/search/json/ response; firefox appears once per repo/arch pair
SAMPLE_ARCHWEB_RESPONSE = {
    "version": 2,
    "limit": 250,
    "valid": True,
    "num_pages": 1,
    "page": 1,
    "results": [
        {
            "pkgname": "firefox",
            "pkgbase": "firefox",
            "repo": "extra",
            "arch": "x86_64",
            "pkgver": "131.0",
            "pkgrel": "1",
            "epoch": 0,
            "pkgdesc": "Fast, Private & Safe Web Browser",
            "url": "https://www.mozilla.org/firefox/"
        },
        {
            "pkgname": "firefox",
            "pkgbase": "firefox",
            "repo": "extra-testing",
            "arch": "x86_64",
            "pkgver": "132.0",
            "pkgrel": "1",
            "epoch": 0,
            "pkgdesc": "Fast, Private & Safe Web Browser",
            "url": "https://www.mozilla.org/firefox/"
        },
        {
            "pkgname": "firefox-i18n-de",
            "pkgbase": "firefox-i18n",
            "repo": "extra",
            "arch": "any",
            "pkgver": "131.0",
            "pkgrel": "1",
            "epoch": 0,
            "pkgdesc": "German language pack for Firefox",
            "url": "https://www.mozilla.org/firefox/"
        },
        {
            "pkgname": "firefox-ublock-origin",
            "pkgbase": "firefox-ublock-origin",
            "repo": "extra",
            "arch": "any",
            "pkgver": "1.60.0",
            "pkgrel": "1",
            "epoch": 1,
            "pkgdesc": "",
            "url": "https://github.com/gorhill/uBlock"
        }
    ]
}

# aur.archlinux.org/rpc/?v=5&type=search response
SAMPLE_AUR_RESPONSE = {
    "version": 5,
    "type": "search",
    "resultcount": 3,
    "results": [
        {
            "ID": 1,
            "Name": "firefox-nightly",
            "PackageBase": "firefox-nightly",
            "Version": "133.0a1-1",
            "Description": "Standalone Web Browser from Mozilla - Nightly build",
            "NumVotes": 100,
            "Popularity": 1.2
        },
        {
            "ID": 2,
            "Name": "firefox-esr-bin",
            "PackageBase": "firefox-esr-bin",
            "Version": "128.3.0-1",
            "Description": None,
            "NumVotes": 20,
            "Popularity": 0.4
        },
        {
            "ID": 3,
            "Name": "firefox-nightly",
            "PackageBase": "firefox-nightly",
            "Version": "133.0a1-1",
            "Description": "Standalone Web Browser from Mozilla - Nightly build",
            "NumVotes": 100,
            "Popularity": 1.2
        }
    ]
}

SAMPLE_AUR_ERROR = {
    "version": 5,
    "type": "error",
    "resultcount": 0,
    "results": [],
    "error": "Too many package results."
}

SAMPLE_PACMAN_SS_OUTPUT = """\
extra/firefox 131.0-1 [installed]
    Fast, Private & Safe Web Browser
extra/firefox-developer-edition 132.0b5-1 (browsers)
    Fast, Private & Safe Web Browser - Developer Edition
    with extra tooling
core/filesystem 2024.04.07-1 (base) [installed: 2024.01.01-1]
    Base Arch Linux files
"""
