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
Attribute groups attached to DDMS components.
"""
from ddms.exceptions import MissingRequiredFieldError, CrossFieldConsistencyError, \
    InvalidFormatError
from ddms.names import ISM_VOCABULARY, XLINK_VOCABULARY

from .base import DdmsAttributeGroup
from .fields import Attribute


class SecurityAttributes(DdmsAttributeGroup):
    """
    The Information Security Marking attributes. The values of the
    controlled vocabularies are checked only for their lexical form.
    """
    description = 'security attributes'

    atomic_energy_markings = Attribute('atomicEnergyMarkings', vocabulary=ISM_VOCABULARY,
                                       xs_list=True, checks=('token',), since='3.1')
    classification = Attribute(vocabulary=ISM_VOCABULARY, checks=('token',))
    classification_reason = Attribute('classificationReason', vocabulary=ISM_VOCABULARY)
    classified_by = Attribute('classifiedBy', vocabulary=ISM_VOCABULARY)
    compilation_reason = Attribute('compilationReason', vocabulary=ISM_VOCABULARY, since='3.0')
    complies_with = Attribute('compliesWith', vocabulary=ISM_VOCABULARY,
                              xs_list=True, checks=('token',), since='3.1')
    date_of_exempted_source = Attribute('dateOfExemptedSource', vocabulary=ISM_VOCABULARY,
                                        checks=('xs:date',), until='3.1')
    declass_date = Attribute('declassDate', vocabulary=ISM_VOCABULARY, checks=('xs:date',))
    declass_event = Attribute('declassEvent', vocabulary=ISM_VOCABULARY)
    declass_exception = Attribute('declassException', vocabulary=ISM_VOCABULARY,
                                  checks=('token',))
    declass_manual_review = Attribute('declassManualReview', vocabulary=ISM_VOCABULARY,
                                      datatype=bool, until='3.0')
    derivatively_classified_by = Attribute('derivativelyClassifiedBy',
                                           vocabulary=ISM_VOCABULARY)
    derived_from = Attribute('derivedFrom', vocabulary=ISM_VOCABULARY)
    display_only_to = Attribute('displayOnlyTo', vocabulary=ISM_VOCABULARY,
                                xs_list=True, checks=('token',), since='3.1')
    dissemination_controls = Attribute('disseminationControls', vocabulary=ISM_VOCABULARY,
                                       xs_list=True, checks=('token',))
    fgi_source_open = Attribute('FGIsourceOpen', vocabulary=ISM_VOCABULARY,
                                xs_list=True, checks=('token',))
    fgi_source_protected = Attribute('FGIsourceProtected', vocabulary=ISM_VOCABULARY,
                                     xs_list=True, checks=('token',))
    non_ic_markings = Attribute('nonICmarkings', vocabulary=ISM_VOCABULARY,
                                xs_list=True, checks=('token',))
    non_us_controls = Attribute('nonUSControls', vocabulary=ISM_VOCABULARY,
                                xs_list=True, checks=('token',), since='3.1')
    owner_producer = Attribute('ownerProducer', vocabulary=ISM_VOCABULARY,
                               xs_list=True, checks=('token',))
    releasable_to = Attribute('releasableTo', vocabulary=ISM_VOCABULARY,
                              xs_list=True, checks=('token',))
    sar_identifier = Attribute('SARIdentifier', vocabulary=ISM_VOCABULARY,
                               xs_list=True, checks=('token',))
    sci_controls = Attribute('SCIcontrols', vocabulary=ISM_VOCABULARY,
                             xs_list=True, checks=('token',))
    type_of_exempted_source = Attribute('typeOfExemptedSource', vocabulary=ISM_VOCABULARY,
                                        checks=('token',), until='3.1')

    def require(self) -> None:
        self.require_classification()

    def require_classification(self) -> None:
        """Checks that a classification and at least one owner/producer are set."""
        if not self.classification:
            raise MissingRequiredFieldError('classification attribute is required.')
        elif not self.owner_producer:
            raise MissingRequiredFieldError('At least 1 ownerProducer must be set.')


class XLinkAttributes(DdmsAttributeGroup):
    """The XML Linking attributes of locator links."""
    description = 'XLink attributes'

    type = Attribute(vocabulary=XLINK_VOCABULARY, choices=('locator', 'simple', 'resource'))
    href = Attribute(vocabulary=XLINK_VOCABULARY, checks=('uri',))
    role = Attribute(vocabulary=XLINK_VOCABULARY, checks=('uri',))
    title = Attribute(vocabulary=XLINK_VOCABULARY)
    label = Attribute(vocabulary=XLINK_VOCABULARY, checks=('ncname',))

    def require(self) -> None:
        if not self.type:
            raise MissingRequiredFieldError('type attribute is required.')
        elif not self.href:
            raise MissingRequiredFieldError('href attribute is required.')


class SRSAttributes(DdmsAttributeGroup):
    """The spatial reference system attributes of GML geometries."""
    description = 'SRS attributes'

    srs_name = Attribute('srsName', vocabulary=None, checks=('uri',))
    srs_dimension = Attribute('srsDimension', vocabulary=None, datatype=int,
                              checks=('positive',))
    axis_labels = Attribute('axisLabels', vocabulary=None, xs_list=True, checks=('ncname',))
    uom_labels = Attribute('uomLabels', vocabulary=None, xs_list=True, checks=('ncname',))

    def validate(self) -> None:
        super().validate()
        if self.uom_labels and not self.axis_labels:
            raise CrossFieldConsistencyError(
                'The uomLabels attribute can only be used in tandem with axisLabels.'
            )
        elif self.axis_labels and not self.srs_name:
            raise CrossFieldConsistencyError(
                'The axisLabels attribute can only be used in tandem with an srsName.'
            )

    def require(self) -> None:
        if not self.srs_name:
            raise MissingRequiredFieldError('srsName attribute is required.')


class NoticeAttributes(DdmsAttributeGroup):
    """The ISM attributes that qualify a notice, available since DDMS 4.0.1."""
    description = 'notice attributes'

    notice_type = Attribute('noticeType', vocabulary=ISM_VOCABULARY, checks=('token',))
    notice_reason = Attribute('noticeReason', vocabulary=ISM_VOCABULARY)
    notice_date = Attribute('noticeDate', vocabulary=ISM_VOCABULARY, checks=('xs:date',))
    unregistered_notice_type = Attribute('unregisteredNoticeType', vocabulary=ISM_VOCABULARY)
    external_notice = Attribute('externalNotice', vocabulary=ISM_VOCABULARY,
                                datatype=bool, since='5.0')

    def validate(self) -> None:
        super().validate()
        for name in ('notice_reason', 'unregistered_notice_type'):
            value = getattr(self, name)
            if value is not None and len(value) > 2048:
                field_name = self.fields[name].get_name(self._version)
                raise InvalidFormatError(f'The {field_name} attribute must be 2048 '
                                         f'characters or less.')
