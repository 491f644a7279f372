"""Bundled SPDX license data and mapping tables.

Which license and exception ids exist is taken from the license index of the
license-expression library, see ``license_inspector.spdx.registry``. This
module adds what the index does not carry: full names and texts of common
licenses, the ids SPDX has deprecated, and mapping tables which associate
non-canonical spellings with SPDX expression strings. The mapping tables are
parsed and checked once when ``license_inspector.spdx.mapping`` is imported.
"""

# Based on https://spdx.org/licenses/
LICENSE_NAMES: tuple[tuple[str, str], ...] = (
    ("0BSD", "BSD Zero Clause License"),
    ("AFL-1.1", "Academic Free License v1.1"),
    ("AFL-1.2", "Academic Free License v1.2"),
    ("AFL-2.0", "Academic Free License v2.0"),
    ("AFL-2.1", "Academic Free License v2.1"),
    ("AFL-3.0", "Academic Free License v3.0"),
    ("AGPL-1.0", "Affero General Public License v1.0"),
    ("AGPL-1.0-only", "Affero General Public License v1.0 only"),
    ("AGPL-1.0-or-later", "Affero General Public License v1.0 or later"),
    ("AGPL-3.0", "GNU Affero General Public License v3.0"),
    ("AGPL-3.0-only", "GNU Affero General Public License v3.0 only"),
    ("AGPL-3.0-or-later", "GNU Affero General Public License v3.0 or later"),
    ("Aladdin", "Aladdin Free Public License"),
    ("Apache-1.0", "Apache License 1.0"),
    ("Apache-1.1", "Apache License 1.1"),
    ("Apache-2.0", "Apache License 2.0"),
    ("APSL-1.0", "Apple Public Source License 1.0"),
    ("APSL-2.0", "Apple Public Source License 2.0"),
    ("Artistic-1.0", "Artistic License 1.0"),
    ("Artistic-1.0-Perl", "Artistic License 1.0 (Perl)"),
    ("Artistic-2.0", "Artistic License 2.0"),
    ("Beerware", "Beerware License"),
    ("BlueOak-1.0.0", "Blue Oak Model License 1.0.0"),
    ("BSD-1-Clause", "BSD 1-Clause License"),
    ("BSD-2-Clause", 'BSD 2-Clause "Simplified" License'),
    ("BSD-2-Clause-FreeBSD", "BSD 2-Clause FreeBSD License"),
    ("BSD-2-Clause-NetBSD", "BSD 2-Clause NetBSD License"),
    ("BSD-2-Clause-Patent", "BSD-2-Clause Plus Patent License"),
    ("BSD-3-Clause", 'BSD 3-Clause "New" or "Revised" License'),
    ("BSD-3-Clause-Clear", "BSD 3-Clause Clear License"),
    ("BSD-4-Clause", 'BSD 4-Clause "Original" or "Old" License'),
    ("BSL-1.0", "Boost Software License 1.0"),
    ("bzip2-1.0.6", "bzip2 and libbzip2 License v1.0.6"),
    ("CC-BY-3.0", "Creative Commons Attribution 3.0 Unported"),
    ("CC-BY-4.0", "Creative Commons Attribution 4.0 International"),
    ("CC-BY-SA-3.0", "Creative Commons Attribution Share Alike 3.0 Unported"),
    ("CC-BY-SA-4.0", "Creative Commons Attribution Share Alike 4.0 International"),
    ("CC0-1.0", "Creative Commons Zero v1.0 Universal"),
    ("CDDL-1.0", "Common Development and Distribution License 1.0"),
    ("CDDL-1.1", "Common Development and Distribution License 1.1"),
    ("CPL-1.0", "Common Public License 1.0"),
    ("curl", "curl License"),
    ("ECL-2.0", "Educational Community License v2.0"),
    ("eCos-2.0", "eCos license version 2.0"),
    ("EFL-2.0", "Eiffel Forum License v2.0"),
    ("EPL-1.0", "Eclipse Public License 1.0"),
    ("EPL-2.0", "Eclipse Public License 2.0"),
    ("EUPL-1.0", "European Union Public License 1.0"),
    ("EUPL-1.1", "European Union Public License 1.1"),
    ("EUPL-1.2", "European Union Public License 1.2"),
    ("FTL", "Freetype Project License"),
    ("GFDL-1.1", "GNU Free Documentation License v1.1"),
    ("GFDL-1.1-only", "GNU Free Documentation License v1.1 only"),
    ("GFDL-1.1-or-later", "GNU Free Documentation License v1.1 or later"),
    ("GFDL-1.2", "GNU Free Documentation License v1.2"),
    ("GFDL-1.2-only", "GNU Free Documentation License v1.2 only"),
    ("GFDL-1.2-or-later", "GNU Free Documentation License v1.2 or later"),
    ("GFDL-1.3", "GNU Free Documentation License v1.3"),
    ("GFDL-1.3-only", "GNU Free Documentation License v1.3 only"),
    ("GFDL-1.3-or-later", "GNU Free Documentation License v1.3 or later"),
    ("GPL-1.0", "GNU General Public License v1.0 only"),
    ("GPL-1.0-only", "GNU General Public License v1.0 only"),
    ("GPL-1.0-or-later", "GNU General Public License v1.0 or later"),
    ("GPL-2.0", "GNU General Public License v2.0 only"),
    ("GPL-2.0-only", "GNU General Public License v2.0 only"),
    ("GPL-2.0-or-later", "GNU General Public License v2.0 or later"),
    ("GPL-2.0-with-autoconf-exception", "GNU General Public License v2.0 w/Autoconf exception"),
    ("GPL-2.0-with-bison-exception", "GNU General Public License v2.0 w/Bison exception"),
    ("GPL-2.0-with-classpath-exception", "GNU General Public License v2.0 w/Classpath exception"),
    ("GPL-2.0-with-font-exception", "GNU General Public License v2.0 w/Font exception"),
    ("GPL-2.0-with-GCC-exception", "GNU General Public License v2.0 w/GCC Runtime Library exception"),
    ("GPL-3.0", "GNU General Public License v3.0 only"),
    ("GPL-3.0-only", "GNU General Public License v3.0 only"),
    ("GPL-3.0-or-later", "GNU General Public License v3.0 or later"),
    ("GPL-3.0-with-autoconf-exception", "GNU General Public License v3.0 w/Autoconf exception"),
    ("GPL-3.0-with-GCC-exception", "GNU General Public License v3.0 w/GCC Runtime Library exception"),
    ("HPND", "Historical Permission Notice and Disclaimer"),
    ("ICU", "ICU License"),
    ("IJG", "Independent JPEG Group License"),
    ("ISC", "ISC License"),
    ("JSON", "JSON License"),
    ("LGPL-2.0", "GNU Library General Public License v2 only"),
    ("LGPL-2.0-only", "GNU Library General Public License v2 only"),
    ("LGPL-2.0-or-later", "GNU Library General Public License v2 or later"),
    ("LGPL-2.1", "GNU Lesser General Public License v2.1 only"),
    ("LGPL-2.1-only", "GNU Lesser General Public License v2.1 only"),
    ("LGPL-2.1-or-later", "GNU Lesser General Public License v2.1 or later"),
    ("LGPL-3.0", "GNU Lesser General Public License v3.0 only"),
    ("LGPL-3.0-only", "GNU Lesser General Public License v3.0 only"),
    ("LGPL-3.0-or-later", "GNU Lesser General Public License v3.0 or later"),
    ("Libpng", "libpng License"),
    ("MIT", "MIT License"),
    ("MIT-0", "MIT No Attribution"),
    ("MPL-1.0", "Mozilla Public License 1.0"),
    ("MPL-1.1", "Mozilla Public License 1.1"),
    ("MPL-2.0", "Mozilla Public License 2.0"),
    ("MPL-2.0-no-copyleft-exception", "Mozilla Public License 2.0 (no copyleft exception)"),
    ("MS-PL", "Microsoft Public License"),
    ("MS-RL", "Microsoft Reciprocal License"),
    ("NCSA", "University of Illinois/NCSA Open Source License"),
    ("NetCDF", "NetCDF license"),
    ("Nunit", "Nunit License"),
    ("ODbL-1.0", "Open Data Commons Open Database License v1.0"),
    ("OFL-1.1", "SIL Open Font License 1.1"),
    ("OpenSSL", "OpenSSL License"),
    ("PHP-3.01", "PHP License v3.01"),
    ("PostgreSQL", "PostgreSQL License"),
    ("PSF-2.0", "Python Software Foundation License 2.0"),
    ("Python-2.0", "Python License 2.0"),
    ("Ruby", "Ruby License"),
    ("StandardML-NJ", "Standard ML of New Jersey License"),
    ("Unicode-DFS-2016", "Unicode License Agreement - Data Files and Software (2016)"),
    ("Unlicense", "The Unlicense"),
    ("UPL-1.0", "Universal Permissive License v1.0"),
    ("Vim", "Vim License"),
    ("W3C", "W3C Software Notice and License (2002-12-31)"),
    ("WTFPL", "Do What The F*ck You Want To Public License"),
    ("wxWindows", "wxWindows Library License"),
    ("X11", "X11 License"),
    ("Zlib", "zlib License"),
    ("ZPL-2.0", "Zope Public License 2.0"),
    ("ZPL-2.1", "Zope Public License 2.1"),
)

EXCEPTION_NAMES: tuple[tuple[str, str], ...] = (
    ("389-exception", "389 Directory Server Exception"),
    ("Autoconf-exception-2.0", "Autoconf exception 2.0"),
    ("Autoconf-exception-3.0", "Autoconf exception 3.0"),
    ("Bison-exception-2.2", "Bison exception 2.2"),
    ("Bootloader-exception", "Bootloader Distribution Exception"),
    ("Classpath-exception-2.0", "Classpath exception 2.0"),
    ("CLISP-exception-2.0", "CLISP exception 2.0"),
    ("eCos-exception-2.0", "eCos exception 2.0"),
    ("Font-exception-2.0", "Font exception 2.0"),
    ("freertos-exception-2.0", "FreeRTOS Exception 2.0"),
    ("GCC-exception-2.0", "GCC Runtime Library exception 2.0"),
    ("GCC-exception-3.1", "GCC Runtime Library exception 3.1"),
    ("i2p-gpl-java-exception", "i2p GPL+Java Exception"),
    ("Libtool-exception", "Libtool Exception"),
    ("Linux-syscall-note", "Linux Syscall Note"),
    ("LLVM-exception", "LLVM Exception"),
    ("Nokia-Qt-exception-1.1", "Nokia Qt LGPL exception 1.1"),
    ("OCaml-LGPL-linking-exception", "OCaml LGPL Linking Exception"),
    ("OpenJDK-assembly-exception-1.0", "OpenJDK Assembly exception 1.0"),
    ("Qt-GPL-exception-1.0", "Qt GPL exception 1.0"),
    ("Qt-LGPL-exception-1.1", "Qt LGPL exception 1.1"),
    ("u-boot-exception-2.0", "U-Boot exception 2.0"),
    ("Universal-FOSS-exception-1.0", "Universal FOSS Exception, Version 1.0"),
    ("WxWindows-exception-3.1", "WxWindows Library Exception 3.1"),
)

# Ids the SPDX license list marks as deprecated.
DEPRECATED_LICENSES: tuple[str, ...] = (
    "AGPL-1.0",
    "AGPL-3.0",
    "BSD-2-Clause-FreeBSD",
    "BSD-2-Clause-NetBSD",
    "eCos-2.0",
    "GFDL-1.1",
    "GFDL-1.2",
    "GFDL-1.3",
    "GPL-1.0",
    "GPL-2.0",
    "GPL-2.0-with-autoconf-exception",
    "GPL-2.0-with-bison-exception",
    "GPL-2.0-with-classpath-exception",
    "GPL-2.0-with-font-exception",
    "GPL-2.0-with-GCC-exception",
    "GPL-3.0",
    "GPL-3.0-with-autoconf-exception",
    "GPL-3.0-with-GCC-exception",
    "LGPL-2.0",
    "LGPL-2.1",
    "LGPL-3.0",
    "Nunit",
    "StandardML-NJ",
    "wxWindows",
)

DEPRECATED_EXCEPTIONS: tuple[str, ...] = ("Nokia-Qt-exception-1.1",)

LICENSE_TEXTS: dict[str, str] = {
    "0BSD": (
        "Permission to use, copy, modify, and/or distribute this software for any\n"
        "purpose with or without fee is hereby granted.\n"
        "\n"
        'THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES\n'
        "WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF\n"
        "MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR\n"
        "ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES\n"
        "WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN\n"
        "ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF\n"
        "OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.\n"
    ),
    "ISC": (
        "Permission to use, copy, modify, and/or distribute this software for any\n"
        "purpose with or without fee is hereby granted, provided that the above\n"
        "copyright notice and this permission notice appear in all copies.\n"
        "\n"
        'THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES\n'
        "WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF\n"
        "MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR\n"
        "ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES\n"
        "WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN\n"
        "ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF\n"
        "OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.\n"
    ),
    "MIT": (
        "Permission is hereby granted, free of charge, to any person obtaining a copy\n"
        'of this software and associated documentation files (the "Software"), to deal\n'
        "in the Software without restriction, including without limitation the rights\n"
        "to use, copy, modify, merge, publish, distribute, sublicense, and/or sell\n"
        "copies of the Software, and to permit persons to whom the Software is\n"
        "furnished to do so, subject to the following conditions:\n"
        "\n"
        "The above copyright notice and this permission notice shall be included in all\n"
        "copies or substantial portions of the Software.\n"
        "\n"
        'THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR\n'
        "IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,\n"
        "FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE\n"
        "AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER\n"
        "LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,\n"
        "OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE\n"
        "SOFTWARE.\n"
    ),
}

# When an alias carries no version, the most commonly used version is assumed.
ALIASES: tuple[tuple[str, str], ...] = (
    ("afl", "AFL-3.0"),
    ("afl-2", "AFL-2.0"),
    ("afl2", "AFL-2.0"),
    ("afl2.0", "AFL-2.0"),
    ("afl2.1", "AFL-2.1"),
    ("AFLv2.1", "AFL-2.1"),
    ("agpl", "AGPL-3.0-only"),
    ("ALv2", "Apache-2.0"),
    ("Apache", "Apache-2.0"),
    ("Apache-2", "Apache-2.0"),
    ("apache-license", "Apache-2.0"),
    ("Apache2", "Apache-2.0"),
    ("APL2", "Apache-2.0"),
    ("APLv2.0", "Apache-2.0"),
    ("ASL", "Apache-2.0"),
    ("Boost", "BSL-1.0"),
    ("Bouncy", "MIT"),
    ("bouncy-license", "MIT"),
    ("BSD", "BSD-3-Clause"),
    ("BSD-3", "BSD-3-Clause"),
    ("bsd-license", "BSD-3-Clause"),
    ("bsd-licensed", "BSD-3-Clause"),
    ("BSD-like", "BSD-3-Clause"),
    ("BSD-style", "BSD-3-Clause"),
    ("BSD2", "BSD-2-Clause"),
    ("BSD3", "BSD-3-Clause"),
    ("bsl", "BSL-1.0"),
    ("bsl1.0", "BSL-1.0"),
    ("CC0", "CC0-1.0"),
    ("cddl", "CDDL-1.0"),
    ("cddl1.0", "CDDL-1.0"),
    ("cddl1.1", "CDDL-1.1"),
    ("CPL", "CPL-1.0"),
    ("EDL-1.0", "BSD-3-Clause"),
    ("efl", "EFL-2.0"),
    ("epl", "EPL-1.0"),
    ("epl1.0", "EPL-1.0"),
    ("epl2.0", "EPL-2.0"),
    ("eupl", "EUPL-1.0"),
    ("eupl1.0", "EUPL-1.0"),
    ("eupl1.1", "EUPL-1.1"),
    ("eupl1.2", "EUPL-1.2"),
    ("fdl", "GFDL-1.3-only"),
    ("FreeBSD", "BSD-2-Clause"),
    ("gfdl", "GFDL-1.3-only"),
    ("GPL", "GPL-2.0-only"),
    ("GPL-2", "GPL-2.0-only"),
    ("gpl-license", "GPL-2.0-only"),
    ("GPL2", "GPL-2.0-only"),
    ("gpl3", "GPL-3.0-only"),
    ("GPLv2", "GPL-2.0-only"),
    ("GPLv2+", "GPL-2.0-or-later"),
    ("GPLv3", "GPL-3.0-only"),
    ("GPLv3+", "GPL-3.0-or-later"),
    ("isc-license", "ISC"),
    ("ISCL", "ISC"),
    ("LGPL", "LGPL-2.0-or-later"),
    ("LGPL-3", "LGPL-3.0-only"),
    ("LGPL2", "LGPL-2.1-only"),
    ("LGPL3", "LGPL-3.0-only"),
    ("LGPLv2", "LGPL-2.1-only"),
    ("LGPLv3", "LGPL-3.0-only"),
    ("mit-license", "MIT"),
    ("mit-licensed", "MIT"),
    ("MIT-like", "MIT"),
    ("MIT-style", "MIT"),
    ("MPL", "MPL-2.0"),
    ("mpl-2", "MPL-2.0"),
    ("mpl2", "MPL-2.0"),
    ("mpl2.0", "MPL-2.0"),
    ("MPLv2", "MPL-2.0"),
    ("MPLv2.0", "MPL-2.0"),
    ("ODBL", "ODbL-1.0"),
    ("psf", "Python-2.0"),
    ("psfl", "Python-2.0"),
    ("python", "Python-2.0"),
    ("UNLICENSED", "Unlicense"),
    ("w3cl", "W3C"),
    ("wtf", "WTFPL"),
    ("zope", "ZPL-2.1"),
)

DEPRECATED_LICENSE_IDS: tuple[tuple[str, str], ...] = (
    ("AGPL-1.0", "AGPL-1.0-only"),
    ("AGPL-1.0+", "AGPL-1.0-or-later"),
    ("AGPL-3.0", "AGPL-3.0-only"),
    ("AGPL-3.0+", "AGPL-3.0-or-later"),
    ("GFDL-1.1", "GFDL-1.1-only"),
    ("GFDL-1.1+", "GFDL-1.1-or-later"),
    ("GFDL-1.2", "GFDL-1.2-only"),
    ("GFDL-1.2+", "GFDL-1.2-or-later"),
    ("GFDL-1.3", "GFDL-1.3-only"),
    ("GFDL-1.3+", "GFDL-1.3-or-later"),
    ("GPL-1.0", "GPL-1.0-only"),
    ("GPL-1.0+", "GPL-1.0-or-later"),
    ("GPL-2.0", "GPL-2.0-only"),
    ("GPL-2.0+", "GPL-2.0-or-later"),
    ("GPL-3.0", "GPL-3.0-only"),
    ("GPL-3.0+", "GPL-3.0-or-later"),
    ("LGPL-2.0", "LGPL-2.0-only"),
    ("LGPL-2.0+", "LGPL-2.0-or-later"),
    ("LGPL-2.1", "LGPL-2.1-only"),
    ("LGPL-2.1+", "LGPL-2.1-or-later"),
    ("LGPL-3.0", "LGPL-3.0-only"),
    ("LGPL-3.0+", "LGPL-3.0-or-later"),
    ("eCos-2.0", "GPL-2.0-or-later WITH eCos-exception-2.0"),
    ("wxWindows", "GPL-2.0-or-later WITH WxWindows-exception-3.1"),
)

DEPRECATED_EXCEPTION_IDS: tuple[tuple[str, str], ...] = (
    ("GPL-2.0-with-autoconf-exception", "GPL-2.0-only WITH Autoconf-exception-2.0"),
    ("GPL-2.0-with-bison-exception", "GPL-2.0-only WITH Bison-exception-2.2"),
    ("GPL-2.0-with-classpath-exception", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("GPL-2.0-with-font-exception", "GPL-2.0-only WITH Font-exception-2.0"),
    ("GPL-2.0-with-GCC-exception", "GPL-2.0-only WITH GCC-exception-2.0"),
    ("GPL-3.0-with-autoconf-exception", "GPL-3.0-only WITH Autoconf-exception-3.0"),
    ("GPL-3.0-with-GCC-exception", "GPL-3.0-only WITH GCC-exception-3.1"),
)

# Free-text strings and URLs found in package manifests which the expression grammar
# cannot parse, mostly because they contain white space.
DECLARED_LICENSES: tuple[tuple[str, str], ...] = (
    ("(MIT-style) netCDF C library license", "NetCDF"),
    ("2-clause bdsl", "BSD-2-Clause"),
    ("2-clause BSD license", "BSD-2-Clause"),
    ("2-clause BSDL", "BSD-2-Clause"),
    ("3-clause bdsl", "BSD-3-Clause"),
    ("3-Clause BSD", "BSD-3-Clause"),
    ("3-Clause BSD License", "BSD-3-Clause"),
    ("Academic Free License (AFL)", "AFL-2.1"),
    ("Academic Free License (AFL-2.1)", "AFL-2.1"),
    ("Affero General Public License (AGPL) v. 3", "AGPL-3.0-only"),
    ("AGPL v3+", "AGPL-3.0-or-later"),
    ("AL 2.0", "Apache-2.0"),
    ("Aladdin Free Public License (AFPL)", "Aladdin"),
    ("Amazon Software License", "LicenseRef-scancode-amazon-sl"),
    ("Apache  Version 2.0, January 2004", "Apache-2.0"),
    ("Apache 2", "Apache-2.0"),
    ("Apache 2.0", "Apache-2.0"),
    ("Apache 2.0 License", "Apache-2.0"),
    ("Apache License", "Apache-2.0"),
    ("Apache License (2.0)", "Apache-2.0"),
    ("Apache License 2", "Apache-2.0"),
    ("Apache License v2", "Apache-2.0"),
    ("Apache License v2.0", "Apache-2.0"),
    ("Apache License Version 2", "Apache-2.0"),
    ("Apache License Version 2.0", "Apache-2.0"),
    ("Apache License, 2.0", "Apache-2.0"),
    ("Apache License, V2 or later", "Apache-2.0"),
    ("Apache License, V2.0 or later", "Apache-2.0"),
    ("Apache License, Version 2", "Apache-2.0"),
    ("Apache License, Version 2.0", "Apache-2.0"),
    ("Apache License, Version 2.0 and Common Development And Distribution License (CDDL) Version 1.0", "Apache-2.0 AND CDDL-1.0"),
    ("Apache License,Version 2.0", "Apache-2.0"),
    ("Apache Public License 2.0", "Apache-2.0"),
    ("Apache Software", "Apache-2.0"),
    ("Apache Software License", "Apache-2.0"),
    ("Apache Software License (Apache-2.0)", "Apache-2.0"),
    ("Apache Software License - Version 2.0", "Apache-2.0"),
    ("Apache Software License 2.0", "Apache-2.0"),
    ("Apache Software License, version 1.1", "Apache-1.1"),
    ("Apache Software License, Version 2", "Apache-2.0"),
    ("Apache Software License, version 2.0", "Apache-2.0"),
    ("Apache Software Licenses", "Apache-2.0"),
    ("Apache v 2.0", "Apache-2.0"),
    ("Apache v2", "Apache-2.0"),
    ("Apache v2.0", "Apache-2.0"),
    ("Apache version 2.0", "Apache-2.0"),
    ("Apache, Version 2.0", "Apache-2.0"),
    ("Apache-2.0 */ &#39; &quot; &#x3D;end --", "Apache-2.0"),
    ("Apple Public Source License", "APSL-1.0"),
    ("Artistic 2.0", "Artistic-2.0"),
    ("Artistic License", "Artistic-2.0"),
    ("artistic license v2.0", "Artistic-2.0"),
    ("ASF 2.0", "Apache-2.0"),
    ("ASL 2", "Apache-2.0"),
    ("ASL 2.0", "Apache-2.0"),
    ("ASL, version 2", "Apache-2.0"),
    ("Berkeley Software Distribution (BSD) License", "BSD-2-Clause"),
    ("Boost License", "BSL-1.0"),
    ("Boost License v1.0", "BSL-1.0"),
    ("Boost Software License", "BSL-1.0"),
    ("Boost Software License 1.0 (BSL-1.0)", "BSL-1.0"),
    ("Bouncy Castle Licence", "MIT"),
    ("Bouncy Castle License", "MIT"),
    ("BSD (3-clause)", "BSD-3-Clause"),
    ("BSD - See ndg/httpsclient/LICENCE file for details", "BSD-3-Clause"),
    ("BSD 2", "BSD-2-Clause"),
    ("BSD 2 Clause", "BSD-2-Clause"),
    ("BSD 2-Clause", "BSD-2-Clause"),
    ('BSD 2-clause "Simplified" or "FreeBSD" License', "BSD-2-Clause OR BSD-2-Clause-FreeBSD"),
    ("BSD 2-clause &quot;Simplified&quot; or &quot;FreeBSD&quot; License", "BSD-2-Clause OR BSD-2-Clause-FreeBSD"),
    ("BSD 2-Clause License", "BSD-2-Clause"),
    ("BSD 3", "BSD-3-Clause"),
    ("BSD 3 Clause", "BSD-3-Clause"),
    ("BSD 3-Clause", "BSD-3-Clause"),
    ('BSD 3-Clause "New" or "Revised" License (BSD-3-Clause)', "BSD-3-Clause"),
    ("BSD 3-Clause License", "BSD-3-Clause"),
    ("BSD 3-clause New License", "BSD-3-Clause"),
    ("BSD 4 Clause", "BSD-4-Clause"),
    ("bsd 4-clause", "BSD-3-Clause"),
    ("BSD Four Clause License", "BSD-4-Clause"),
    ("BSD licence", "BSD-3-Clause"),
    ("BSD Licence 3", "BSD-3-Clause"),
    ("BSD License", "BSD-3-Clause"),
    ("BSD License for HSQL", "BSD-3-Clause"),
    ("BSD New", "BSD-3-Clause"),
    ("BSD New license", "BSD-3-Clause"),
    ("BSD or Apache License, Version 2.0", "BSD-3-Clause OR Apache-2.0"),
    ("BSD style", "BSD-3-Clause"),
    ("BSD style license", "BSD-3-Clause"),
    ("BSD Three Clause License", "BSD-3-Clause"),
    ("BSD Two Clause License", "BSD-2-Clause"),
    ("BSD*", "BSD-3-Clause"),
    ("BSD-like license", "BSD-3-Clause"),
    ("BSD-Style + Attribution", "BSD-3-Clause-Attribution"),
    ("BSD-style license", "BSD-3-Clause"),
    ("bzip2 license", "bzip2-1.0.6"),
    ("cc by-nc-sa 2.0", "CC-BY-NC-SA-2.0"),
    ("cc by-nc-sa 2.5", "CC-BY-NC-SA-2.5"),
    ("cc by-nc-sa 3.0", "CC-BY-NC-SA-3.0"),
    ("cc by-nc-sa 4.0", "CC-BY-NC-SA-4.0"),
    ("cc by-sa 2.0", "CC-BY-SA-2.0"),
    ("cc by-sa 2.5", "CC-BY-SA-2.5"),
    ("cc by-sa 3.0", "CC-BY-SA-3.0"),
    ("cc by-sa 4.0", "CC-BY-SA-4.0"),
    ("CC0 1.0 Universal", "CC0-1.0"),
    ("CC0 1.0 Universal (CC0 1.0) Public Domain Dedication", "CC0-1.0"),
    ("CC0 1.0 Universal License", "CC0-1.0"),
    ("CDDL + GPLv2 with classpath exception", "CDDL-1.0 AND GPL-2.0-only WITH Classpath-exception-2.0"),
    ("CDDL 1.0", "CDDL-1.0"),
    ("CDDL 1.1", "CDDL-1.1"),
    ("CDDL License", "CDDL-1.0"),
    ("CDDL or GPL 2 with Classpath Exception", "CDDL-1.0 OR GPL-2.0-only WITH Classpath-exception-2.0"),
    ("CDDL or GPLv2 with exceptions", "CDDL-1.0 OR GPL-2.0-only WITH Classpath-exception-2.0"),
    ("cddl v1.0", "CDDL-1.0"),
    ("CDDL v1.0 / GPL v2 dual license", "CDDL-1.0 OR GPL-2.0-only"),
    ("cddl v1.1", "CDDL-1.1"),
    ("CDDL v1.1 / GPL v2 dual license", "CDDL-1.1 OR GPL-2.0-only"),
    ("CDDL+GPL", "CDDL-1.0 AND GPL-2.0-only"),
    ("CDDL+GPL License", "CDDL-1.0 AND GPL-2.0-only"),
    ("CDDL+GPLv2", "CDDL-1.0 AND GPL-2.0-only"),
    ("CDDL/GPLv2 dual license", "CDDL-1.0 OR GPL-2.0-only"),
    ("CDDL/GPLv2+CE", "CDDL-1.0 OR GPL-2.0-only WITH Classpath-exception-2.0"),
    ("CEA CNRS Inria Logiciel Libre License, version 2.1", "CECILL-2.1"),
    ("CEA CNRS Inria Logiciel Libre License, version 2.1 (CeCILL-2.1)", "CECILL-2.1"),
    ("CeCILL 2.0", "CECILL-2.0"),
    ("CeCILL 2.1", "CECILL-2.1"),
    ("CeCILL Licence française de logiciel libre", "CECILL-2.0"),
    ("CECILL v2", "CECILL-2.0"),
    ("CeCILL v2.1", "CECILL-2.1"),
    ("CeCILL-B Free Software License Agreement (CECILL-B)", "CECILL-B"),
    ("CeCILL-B licence", "CECILL-B"),
    ("CeCILL-C Free Software License Agreement (CECILL-C)", "CECILL-C"),
    ("CERN Open Hardware License v1.2", "CERN-OHL-1.2"),
    ("Common Development and Distribution License", "CDDL-1.0"),
    ("Common Development and Distribution License (CDDL) v1.0", "CDDL-1.0"),
    ("COMMON DEVELOPMENT AND DISTRIBUTION LICENSE (CDDL) Version 1.0", "CDDL-1.0"),
    ("Common Development and Distribution License (CDDL), Version 1.1", "CDDL-1.1"),
    ("common development and distribution license 1.0 (cddl-1.0)", "CDDL-1.0"),
    ("common development and distribution license 1.1 (cddl-1.1)", "CDDL-1.1"),
    ("Common Public License", "CPL-1.0"),
    ("Common Public License - v 1.0", "CPL-1.0"),
    ("Common Public License Version 1.0", "CPL-1.0"),
    ("Commons Clause", "LicenseRef-scancode-commons-clause"),
    ("cpal 1.0", "CPAL-1.0"),
    ("cpal v1.0", "CPAL-1.0"),
    ("Creative Commons", "CC-BY-3.0"),
    ("Creative Commons - Attribution 4.0 International License", "CC-BY-4.0"),
    ("Creative Commons - BY", "CC-BY-3.0"),
    ("Creative Commons 3.0", "CC-BY-3.0"),
    ("Creative Commons 3.0 BY-SA", "CC-BY-SA-3.0"),
    ("Creative Commons Attribution 1.0", "CC-BY-1.0"),
    ("Creative Commons Attribution 2.5", "CC-BY-2.5"),
    ("Creative Commons Attribution 2.5 License", "CC-BY-2.5"),
    ("Creative Commons Attribution 3.0", "CC-BY-3.0"),
    ("Creative Commons Attribution 3.0 License", "CC-BY-3.0"),
    ("Creative Commons Attribution 3.0 Unported (CC BY 3.0)", "CC-BY-3.0"),
    ("Creative Commons Attribution 4.0", "CC-BY-4.0"),
    ("Creative Commons Attribution 4.0 International (CC BY 4.0)", "CC-BY-4.0"),
    ("Creative Commons Attribution 4.0 International Public License", "CC-BY-4.0"),
    ("Creative Commons Attribution License", "CC-BY-3.0"),
    ("Creative Commons Attribution-NonCommercial 4.0 International", "CC-BY-NC-4.0"),
    ("Creative Commons Attribution-NonCommercial-NoDerivatives 4.0 International", "CC-BY-NC-ND-4.0"),
    ("Creative Commons Attribution-NonCommercial-ShareAlike 3.0 Unported (CC BY-NC-SA 3.0)", "CC-BY-NC-SA-3.0"),
    ("Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International Public License", "CC-BY-NC-SA-4.0"),
    ("Creative Commons CC0", "CC0-1.0"),
    ("Creative Commons GNU LGPL, Version 2.1", "LGPL-2.1-only"),
    ("Creative Commons License Attribution-NoDerivs 3.0 Unported", "CC-BY-NC-ND-3.0"),
    ("Creative Commons License Attribution-NonCommercial-ShareAlike 3.0 Unported", "CC-BY-NC-SA-3.0"),
    ("Creative Commons Zero", "CC0-1.0"),
    ("CUP Parser Generator Copyright Notice, License, and Disclaimer", "HPND"),
    ("DBAD", "LicenseRef-ort-dbad"),
    ("Dual License", "LicenseRef-unknown-dual-license"),
    ("Dual license consisting of the CDDL v1.1 and GPL v2", "CDDL-1.1 AND GPL-2.0-only"),
    ("Dual License: CDDL 1.0 and GPL V2 with Classpath Exception", "CDDL-1.0 AND GPL-2.0-only"),
    ("eclipse 1.0", "EPL-1.0"),
    ("eclipse 2.0", "EPL-2.0"),
    ("Eclipse Distribution License (EDL), Version 1.0", "BSD-3-Clause"),
    ("Eclipse Distribution License (New BSD License)", "BSD-3-Clause"),
    ("Eclipse Distribution License - v 1.0", "BSD-3-Clause"),
    ("Eclipse Distribution License v. 1.0", "BSD-3-Clause"),
    ("eclipse license", "EPL-1.0"),
    ("Eclipse Public License", "EPL-1.0"),
    ("Eclipse Public License (EPL)", "EPL-1.0"),
    ("Eclipse Public License (EPL) 1.0", "EPL-1.0"),
    ("Eclipse Public License (EPL) 2.0", "EPL-2.0"),
    ("Eclipse Public License (EPL), Version 1.0", "EPL-1.0"),
    ("Eclipse Public License - v 1.0", "EPL-1.0"),
    ("Eclipse Public License - Version 1.0", "EPL-1.0"),
    ("Eclipse Public License 1.0 (EPL-1.0)", "EPL-1.0"),
    ("Eclipse Public License 2.0", "EPL-2.0"),
    ("Eclipse Public License 2.0 (EPL-2.0)", "EPL-2.0"),
    ("Eclipse Public License v. 2.0", "EPL-2.0"),
    ("Eclipse Public License v1.0", "EPL-1.0"),
    ("Eclipse Public License v2.0", "EPL-2.0"),
    ("Eclipse Public License, Version 1.0", "EPL-1.0"),
    ("Eclipse Publish License, Version 1.0", "EPL-1.0"),
    ("EDL 1.0", "LicenseRef-scancode-edl-1.0"),
    ("Eiffel Forum License", "EFL-2.0"),
    ("Eiffel Forum License (EFL)", "EFL-2.0"),
    ("Eiffel Forum License (EFL-2.0)", "EFL-2.0"),
    ("eiffel license (EFL)", "EFL-2.0"),
    ("EPL (Eclipse Public License), V1.0 or later", "EPL-1.0"),
    ("epl 1.0", "EPL-1.0"),
    ("epl 2.0", "EPL-2.0"),
    ("epl v1.0", "EPL-1.0"),
    ("epl v2.0", "EPL-2.0"),
    ("eu public licence 1.0 (eupl 1.0)", "EUPL-1.0"),
    ("eu public licence 1.1 (eupl 1.1)", "EUPL-1.1"),
    ("eu public licence 1.2 (eupl 1.2)", "EUPL-1.2"),
    ("eupl 1.0", "EUPL-1.0"),
    ("eupl 1.1", "EUPL-1.1"),
    ("eupl 1.2", "EUPL-1.2"),
    ("eupl v1.0", "EUPL-1.0"),
    ("eupl v1.1", "EUPL-1.1"),
    ("eupl v1.2", "EUPL-1.2"),
    ("European Union Public Licence 1.0", "EUPL-1.0"),
    ("european union public licence 1.0 (eupl 1.0)", "EUPL-1.0"),
    ("European Union Public Licence 1.1", "EUPL-1.1"),
    ("european union public licence 1.1 (eupl 1.1)", "EUPL-1.1"),
    ("European Union Public Licence 1.2", "EUPL-1.2"),
    ("european union public licence 1.2 (eupl 1.2)", "EUPL-1.2"),
    ("European Union Public License v. 1.2", "EUPL-1.2"),
    ("Expat license", "MIT"),
    ("General Public License (GPL)", "GPL-2.0-only"),
    ("General Public License 2.0 (GPL)", "GPL-2.0-only"),
    ("GNU Affero General Public License v3", "AGPL-3.0-only"),
    ("GNU Affero General Public License v3 (AGPL-3.0)", "AGPL-3.0-only"),
    ("GNU Affero General Public License v3 (AGPLv3)", "AGPL-3.0-only"),
    ("GNU Affero General Public License v3 or later (AGPL3+)", "AGPL-3.0-or-later"),
    ("GNU Affero General Public License v3 or later (AGPLv3+)", "AGPL-3.0-or-later"),
    ("GNU Affero General Public License, Version 3", "AGPL-3.0-only"),
    ("GNU Affero General Public License, Version 3 with the Commons Clause", "AGPL-3.0-only AND LicenseRef-scancode-commons-clause"),
    ("GNU Free Documentation License (FDL)", "GFDL-1.3-only"),
    ("GNU Free Documentation License (GFDL-1.3)", "GFDL-1.3-only"),
    ("GNU General Lesser Public License (LGPL) version 2.1", "LGPL-2.1-only"),
    ("GNU General Public Library", "GPL-3.0-only"),
    ("GNU General Public License (GPL)", "GPL-3.0-only"),
    ("GNU General Public License (GPL) v. 2", "GPL-2.0-only"),
    ("GNU General Public License (GPL) v. 3", "GPL-3.0-only"),
    ("GNU General Public License (GPL), version 2, with the Classpath exception", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("GNU General Public License 3", "GPL-3.0-only"),
    ("GNU General Public License v2 (GPLv2)", "GPL-2.0-only"),
    ("GNU General Public License v2 or later (GPLv2+)", "GPL-2.0-or-later"),
    ("GNU General Public License v3 (GPLv3)", "GPL-3.0-only"),
    ("GNU General Public License v3 or later (GPLv3+)", "GPL-3.0-or-later"),
    ("GNU General Public License Version 2", "GPL-2.0-only"),
    ("GNU GENERAL PUBLIC LICENSE Version 2, June 1991", "GPL-2.0-only"),
    ("GNU General Public License, version 2", "GPL-2.0-only"),
    ("GNU General Public License, version 2 (GPL2), with the classpath exception", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("GNU General Public License, Version 2 with the Classpath Exception", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("GNU General Public License, version 2, with the Classpath Exception", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("GNU General Public License, Version 3", "GPL-3.0-only"),
    ("gnu gpl", "GPL-2.0-only"),
    ("GNU GPL v2", "GPL-2.0-only"),
    ("gnu gpl v3", "GPL-3.0-only"),
    ("GNU Lesser General Public Licence", "LGPL-2.1-only"),
    ("GNU Lesser General Public License", "LGPL-2.1-only"),
    ("GNU Lesser General Public License (LGPL)", "LGPL-2.1-only"),
    ("GNU Lesser General Public License (LGPL), Version 2.1", "LGPL-2.1-only"),
    ("GNU Lesser General Public License (LGPL), Version 3", "LGPL-3.0-only"),
    ("GNU Lesser General Public License 2.1", "LGPL-2.1-only"),
    ("GNU Lesser General Public License v2 or later (LGPLv2+)", "LGPL-2.0-or-later"),
    ("GNU Lesser General Public License v3 (LGPLv3)", "LGPL-3.0-only"),
    ("GNU Lesser General Public License v3 or later (LGPLv3+)", "LGPL-3.0-or-later"),
    ("GNU Lesser General Public License v3+", "LGPL-3.0-or-later"),
    ("GNU LESSER GENERAL PUBLIC LICENSE V3.0", "LGPL-3.0-only"),
    ("GNU Lesser General Public License Version 2.1", "LGPL-2.1-only"),
    ("GNU Lesser General Public License Version 2.1, February 1999", "LGPL-2.1-only"),
    ("GNU Lesser General Public License, Version 2.1", "LGPL-2.1-only"),
    ("GNU Lesser Public License", "LGPL-2.1-only"),
    ("GNU LGP (GNU General Public License), V2 or later", "LGPL-2.0-or-later"),
    ("GNU LGPL", "LGPL-2.1-only"),
    ("GNU LGPL (GNU Lesser General Public License), V2.1 or later", "LGPL-2.1-or-later"),
    ("GNU LGPL 2.1", "LGPL-2.1-only"),
    ("GNU LGPL 3.0", "LGPL-3.0-only"),
    ("GNU LGPL v2", "LGPL-2.1-only"),
    ("GNU LGPL v2+", "LGPL-2.1-only"),
    ("GNU LGPL v2.1", "LGPL-2.1-or-later"),
    ("GNU LGPL v3", "LGPL-3.0-only"),
    ("GNU LGPL v3+", "LGPL-3.0-or-later"),
    ("GNU Library or Lesser General Public License (LGPL)", "LGPL-2.1-only"),
    ("GNU Library or Lesser General Public License version 2.0 (LGPLv2)", "LGPL-2.0-only"),
    ("GNU Public", "GPL-2.0-only"),
    ("GPL (with dual licensing option)", "GPL-2.0-only"),
    ("gpl (≥ 3)", "GPL-3.0-or-later"),
    ("GPL 2", "GPL-2.0-only"),
    ("GPL 3", "GPL-3.0-only"),
    ("GPL v2", "GPL-2.0-only"),
    ("GPL v2 with ClassPath Exception", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("GPL v2+", "GPL-2.0-or-later"),
    ("GPL v3", "GPL-3.0-only"),
    ("GPL v3+", "GPL-3.0-or-later"),
    ("GPL version 2", "GPL-2.0-only"),
    ("GPL2 w/ CPE", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("GPLv2 with classpath exception", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("GPLv2+CE", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("HERE Proprietary License", "LicenseRef-scancode-here-proprietary"),
    ("Historical Permission Notice and Disclaimer (HPND)", "HPND"),
    ("HSQLDB License", "BSD-3-Clause"),
    ("HSQLDB License, a BSD open source license", "BSD-3-Clause"),
    ("http://ant-contrib.sourceforge.net/tasks/LICENSE.txt", "Apache-1.1"),
    ("http://creativecommons.org/publicdomain/zero/1.0/legalcode", "CC0-1.0"),
    ("http://go.microsoft.com/fwlink/?LinkId=329770", "LicenseRef-scancode-ms-net-library-2018-11"),
    ("http://polymer.github.io/LICENSE.txt", "BSD-3-Clause"),
    ("http://svnkit.com/license.html", "TMate"),
    ("http://www.apache.org/licenses/LICENSE-2.0", "Apache-2.0"),
    ("http://www.apache.org/licenses/LICENSE-2.0.txt", "Apache-2.0"),
    ("http://www.cecill.info/licences/Licence_CeCILL-C_V1-en.txt", "CECILL-1.0"),
    ("http://www.cecill.info/licences/Licence_CeCILL_V2.1-en.txt", "CECILL-2.1"),
    ("http://www.gnu.org/copyleft/lesser.html", "LGPL-3.0-only"),
    ("https://creativecommons.org/licenses/by-nc-nd/1.0", "CC-BY-NC-ND-1.0"),
    ("https://creativecommons.org/licenses/by-nc-nd/2.0", "CC-BY-NC-ND-2.0"),
    ("https://creativecommons.org/licenses/by-nc-nd/2.5", "CC-BY-NC-ND-2.5"),
    ("https://creativecommons.org/licenses/by-nc-nd/3.0", "CC-BY-NC-ND-3.0"),
    ("https://creativecommons.org/licenses/by-nc-nd/4.0", "CC-BY-NC-ND-4.0"),
    ("https://creativecommons.org/licenses/by-nc-sa/1.0", "CC-BY-NC-SA-1.0"),
    ("https://creativecommons.org/licenses/by-nc-sa/2.0", "CC-BY-NC-SA-2.0"),
    ("https://creativecommons.org/licenses/by-nc-sa/2.5", "CC-BY-NC-SA-2.5"),
    ("https://creativecommons.org/licenses/by-nc-sa/3.0", "CC-BY-NC-SA-3.0"),
    ("https://creativecommons.org/licenses/by-nc-sa/4.0", "CC-BY-NC-SA-4.0"),
    ("https://creativecommons.org/licenses/by-nd/1.0", "CC-BY-ND-1.0"),
    ("https://creativecommons.org/licenses/by-nd/2.0", "CC-BY-ND-2.0"),
    ("https://creativecommons.org/licenses/by-nd/2.5", "CC-BY-ND-2.5"),
    ("https://creativecommons.org/licenses/by-nd/3.0", "CC-BY-ND-3.0"),
    ("https://creativecommons.org/licenses/by-nd/4.0", "CC-BY-ND-4.0"),
    ("https://creativecommons.org/licenses/by-sa/1.0", "CC-BY-SA-1.0"),
    ("https://creativecommons.org/licenses/by-sa/2.0", "CC-BY-SA-2.0"),
    ("https://creativecommons.org/licenses/by-sa/2.5", "CC-BY-SA-2.5"),
    ("https://creativecommons.org/licenses/by-sa/3.0", "CC-BY-SA-3.0"),
    ("https://creativecommons.org/licenses/by-sa/4.0", "CC-BY-SA-4.0"),
    ("https://creativecommons.org/licenses/by/1.0", "CC-BY-1.0"),
    ("https://creativecommons.org/licenses/by/2.0", "CC-BY-2.0"),
    ("https://creativecommons.org/licenses/by/2.5", "CC-BY-2.5"),
    ("https://creativecommons.org/licenses/by/3.0", "CC-BY-3.0"),
    ("https://creativecommons.org/licenses/by/4.0", "CC-BY-4.0"),
    ("https://creativecommons.org/publicdomain/zero/1.0/", "CC0-1.0"),
    ("https://raw.github.com/RDFLib/rdflib/master/LICENSE", "BSD-3-Clause"),
    ("https://www.eclipse.org/legal/epl-v10.html", "EPL-1.0"),
    ("https://www.eclipse.org/legal/epl-v20.html", "EPL-2.0"),
    ("IBM Public License", "IPL-1.0"),
    ("icu-unicode license", "ICU"),
    ("Individual BSD License", "BSD-3-Clause"),
    ("ISC License", "ISC"),
    ("ISC License (ISCL)", "ISC"),
    ("ISC/BSD License", "ISC OR BSD-2-Clause"),
    ("Jabber Open Source License", "LicenseRef-scancode-josl-1.0"),
    ("jQuery license", "MIT"),
    ("JSR-000107 JCACHE 2.9 Public Review - Updated Specification License", "LicenseRef-scancode-jsr-107-jcache-spec"),
    ("Jython Software License", "Python-2.0"),
    ("Kirkk.com BSD License", "BSD-3-Clause"),
    ("Lesser General Public License (LGPL)", "LGPL-2.1-only"),
    ("Lesser General Public License, version 3 or greater", "LGPL-3.0-or-later"),
    ("LGPL 2.1", "LGPL-2.1-only"),
    ("LGPL 3", "LGPL-3.0-only"),
    ("LGPL 3.0", "LGPL-3.0-only"),
    ("LGPL 3.0 license", "LGPL-3.0-only"),
    ("LGPL v3", "LGPL-3.0-only"),
    ("LGPL v3+", "LGPL-3.0-or-later"),
    ("LGPL with exceptions or ZPL", "LGPL-3.0-only OR ZPL-2.1"),
    ("LGPL+BSD", "LGPL-2.1-only AND BSD-2-Clause"),
    ("LGPL, version 2.1", "LGPL-2.1-only"),
    ("LGPL, version 3.0", "LGPL-2.1-only"),
    ("LGPL/MIT", "LGPL-3.0-only OR MIT"),
    ("lgplv2 or later", "LGPL-2.1-or-later"),
    ("LGPLv3 or later", "LGPL-3.0-or-later"),
    ("License Agreement For Open Source Computer Vision Library (3-clause BSD License)", "BSD-3-Clause"),
    ("MirOS License (MirOS)", "MirOS"),
    ("MIT / http://rem.mit-license.org", "MIT"),
    ("MIT Licence", "MIT"),
    ("MIT License", "MIT"),
    ("MIT License (http://opensource.org/licenses/MIT)", "MIT"),
    ("MIT license (MIT)", "MIT"),
    ("MIT Licensed. http://www.opensource.org/licenses/mit-license.php", "MIT"),
    ("MIT, 2-clause BSD", "MIT AND BSD-2-Clause"),
    ("MIT, 3-clause BSD", "MIT AND BSD-3-Clause"),
    ("MIT/Expat", "MIT"),
    ("MIT/X11", "MIT OR X11"),
    ("Mockrunner License, based on Apache Software License, version 1.1", "Apache-1.1"),
    ("Modified BSD", "BSD-3-Clause"),
    ("Mozilla Public License", "MPL-2.0"),
    ("Mozilla Public License 1.0 (MPL)", "MPL-1.0"),
    ("Mozilla Public License 1.1 (MPL 1.1)", "MPL-1.1"),
    ("Mozilla Public License 2.0 (MPL 2.0)", "MPL-2.0"),
    ("Mozilla Public License v 2.0", "MPL-2.0"),
    ("Mozilla Public License Version 1.0", "MPL-1.0"),
    ("Mozilla Public License Version 1.1", "MPL-1.1"),
    ("Mozilla Public License Version 2.0", "MPL-2.0"),
    ("Mozilla Public License, Version 2.0", "MPL-2.0"),
    ("MPL 1.1", "MPL-1.1"),
    ("MPL 2.0", "MPL-2.0"),
    ("MPL 2.0 or EPL 1.0", "MPL-2.0 OR EPL-1.0"),
    ("MPL 2.0, and EPL 1.0", "MPL-2.0 AND EPL-1.0"),
    ("MPL v2", "MPL-2.0"),
    ("NCSA License", "NCSA"),
    ("NCSA Open Source License", "NCSA"),
    ("NetBeans CDDL/GPL", "CDDL-1.0 OR GPL-2.0-only"),
    ("netscape License", "NPL-1.1"),
    ("Netscape Public License", "NPL-1.0"),
    ("Netscape Public License (NPL)", "NPL-1.0"),
    ("New BSD", "BSD-3-Clause"),
    ("New BSD licence", "BSD-3-Clause"),
    ("New BSD License", "BSD-3-Clause"),
    ("Nokia Open Source License (NOKOS)", "Nokia"),
    ("ODbL 1.0", "ODbL-1.0"),
    ("ODbL v1.0", "ODbL-1.0"),
    ("Open Software License 3.0 (OSL-3.0)", "OSL-3.0"),
    ("Open Software License v. 3.0", "OSL-3.0"),
    ("Oracle Free Use Terms and Conditions (FUTC)", "LicenseRef-ort-oracle-futc"),
    ("Other/Proprietary License", "LicenseRef-scancode-proprietary-license"),
    ("Perl Artistic v2", "Artistic-1.0-Perl"),
    ("Public Domain", "LicenseRef-scancode-public-domain-disclaimer"),
    ("Public domain (CC0-1.0)", "CC0-1.0"),
    ("Public Domain <http://unlicense.org>", "LicenseRef-scancode-public-domain-disclaimer"),
    ("Public Domain, per Creative Commons CC0", "CC0-1.0"),
    ("public domain, Python, 2-Clause BSD, GPL 3 (see COPYING.txt)", "LicenseRef-scancode-public-domain-disclaimer AND Python-2.0 AND BSD-2-Clause AND GPL-3.0-only"),
    ("PublicDomain", "LicenseRef-scancode-public-domain-disclaimer"),
    ("Python License (CNRI Python License)", "CNRI-Python"),
    ("Python License (CNRI)", "CNRI-Python"),
    ("Python Software Foundation", "Python-2.0"),
    ("Python Software Foundation License", "Python-2.0"),
    ("Qt Public License", "QPL-1.0"),
    ("Qt Public License (QPL)", "QPL-1.0"),
    ("Revised BSD", "BSD-3-Clause"),
    ("Revised BSD License", "BSD-3-Clause"),
    ("Ruby's", "Ruby"),
    ("SIL Open Font License 1.1 (OFL-1.1)", "OFL-1.1"),
    ("SIL OPEN FONT LICENSE Version 1.1", "OFL-1.1"),
    ("Simplified BSD", "BSD-2-Clause"),
    ("Simplified BSD License", "BSD-2-Clause"),
    ("Simplified BSD Liscence", "BSD-2-Clause"),
    ("Sun Industry Standards Source License (SISSL)", "SISSL"),
    ("Sun Public License", "SPL-1.0"),
    ("The (New) BSD License", "BSD-3-Clause"),
    ("The Apache License", "Apache-2.0"),
    ("the Apache License, ASL Version 2.0", "Apache-2.0"),
    ("The Apache License, Version 2.0", "Apache-2.0"),
    ("The Apache Software Licence, Version 2.0", "Apache-2.0"),
    ("The Apache Software License, Version 2.0", "Apache-2.0"),
    ("The BSD 2-Clause License", "BSD-2-Clause"),
    ("The BSD 3-Clause License", "BSD-3-Clause"),
    ("The BSD License", "BSD-2-Clause"),
    ("The BSD Software License", "BSD-2-Clause"),
    ("The Eclipse Public License Version 1.0", "EPL-1.0"),
    ("The GNU General Public License (GPL), Version 2, With Classpath Exception", "GPL-2.0-only WITH Classpath-exception-2.0"),
    ("The GNU General Public License, Version 2", "GPL-2.0-only"),
    ("The GNU Lesser General Public License, Version 2.1", "LGPL-2.1-only"),
    ("The GNU Lesser General Public License, Version 3.0", "LGPL-3.0-only"),
    ("the gpl v3", "GPL-3.0-only"),
    ("The JSON License", "JSON"),
    ("The MIT", "MIT"),
    ("The MIT License", "MIT"),
    ("The MIT License (MIT)", "MIT"),
    ("The MIT License(MIT)", "MIT"),
    ("The New BSD License", "BSD-3-Clause"),
    ("The PostgreSQL License", "PostgreSQL"),
    ("The SAX License", "SAX-PD"),
    ("The Unlicense (Unlicense)", "Unlicense"),
    ("The W3C License", "W3C"),
    ("The W3C Software License", "W3C"),
    ("Three-clause BSD-style", "BSD-3-Clause"),
    ("TMate Open Source License (with dual licensing option)", "TMate"),
    ("Two-clause BSD-style license", "BSD-2-Clause"),
    ("Unicode/ICU License", "ICU"),
    ("Universal Permissive License (UPL)", "UPL-1.0"),
    ("Vovida License 1.0", "VSL-1.0"),
    ("Vovida Software License", "VSL-1.0"),
    ("Vovida Software License 1.0", "VSL-1.0"),
    ("W3C License", "W3C"),
    ("Zlib / Libpng License", "zlib-acknowledgement"),
    ("Zlib/Libpng License", "zlib-acknowledgement"),
    ("zope 1.1", "ZPL-1.1"),
    ("zope 2.0", "ZPL-2.0"),
    ("zope 2.1", "ZPL-2.1"),
    ("zope license", "ZPL-2.1"),
    ("Zope Public", "ZPL-2.1"),
    ("Zope Public License", "ZPL-2.1"),
    ("zope v2.1", "ZPL-2.1"),
    ("ZPL 2.1", "ZPL-2.1"),
)
