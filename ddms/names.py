#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains namespace definitions and vocabulary names of DDMS versions.
"""

###
# Vocabulary keys
DDMS_VOCABULARY = 'ddms'
GML_VOCABULARY = 'gml'
ISM_VOCABULARY = 'ism'
NTK_VOCABULARY = 'ntk'
TSPI_VOCABULARY = 'tspi'
VIRT_VOCABULARY = 'virt'
XLINK_VOCABULARY = 'xlink'

VOCABULARIES = (DDMS_VOCABULARY, GML_VOCABULARY, ISM_VOCABULARY, NTK_VOCABULARY,
                TSPI_VOCABULARY, VIRT_VOCABULARY, XLINK_VOCABULARY)

###
# Namespace URIs of the DDMS core schemas
DDMS_2_0_NAMESPACE = 'http://metadata.dod.mil/mdr/ns/DDMS/2.0/'
DDMS_3_0_NAMESPACE = 'http://metadata.dod.mil/mdr/ns/DDMS/3.0/'
DDMS_3_1_NAMESPACE = 'http://metadata.dod.mil/mdr/ns/DDMS/3.1/'
DDMS_4_NAMESPACE = 'urn:us:mil:ces:metadata:ddms:4'
DDMS_5_NAMESPACE = 'urn:us:mil:ces:metadata:ddms:5'

###
# Namespace URIs of auxiliary vocabularies
ISM_V2_NAMESPACE = 'urn:us:gov:ic:ism:v2'
"URI of the Information Security Marking namespace used by DDMS 2.0 (ISM)"

ISM_NAMESPACE = 'urn:us:gov:ic:ism'
"URI of the Information Security Marking namespace (ISM)"

NTK_NAMESPACE = 'urn:us:gov:ic:ntk'
"URI of the Need-To-Know namespace (ntk)"

VIRT_NAMESPACE = 'urn:us:gov:ic:virt'
"URI of the Virtual Coverage namespace (virt)"

GML_NAMESPACE = 'http://www.opengis.net/gml'
"URI of the Geography Markup Language namespace used by DDMS 2.0 (gml)"

GML_3_2_NAMESPACE = 'http://www.opengis.net/gml/3.2'
"URI of the Geography Markup Language 3.2 namespace (gml)"

TSPI_NAMESPACE = 'http://metadata.ces.mil/mdr/ns/GSIP/tspi/2.0'
"URI of the Time-Space-Position Information namespace (tspi)"

XLINK_NAMESPACE = 'http://www.w3.org/1999/xlink'
"URI of the XML Linking Language (XLink)"

###
# Default namespace prefixes of vocabularies
DEFAULT_PREFIXES = {
    DDMS_VOCABULARY: 'ddms',
    GML_VOCABULARY: 'gml',
    ISM_VOCABULARY: 'ISM',
    NTK_VOCABULARY: 'ntk',
    TSPI_VOCABULARY: 'tspi',
    VIRT_VOCABULARY: 'virt',
    XLINK_VOCABULARY: 'xlink',
}

###
# Extended values admitted in place of dates
NOT_APPLICABLE = 'Not Applicable'
UNKNOWN = 'Unknown'
EXTENDED_DATE_VALUES = (NOT_APPLICABLE, UNKNOWN)
