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
ISM notices, available since DDMS 4.0.1.
"""
from ddms.exceptions import MissingRequiredFieldError
from ddms.names import ISM_VOCABULARY

from .base import DdmsComponent
from .fields import Attribute, Text, Children, AttributeGroup
from .attributes import SecurityAttributes, NoticeAttributes


class NoticeText(DdmsComponent):
    """The text of a notice, optionally bound to points of contact."""
    element_name = 'NoticeText'
    vocabulary = ISM_VOCABULARY
    output_name = 'noticeText'
    since = '4.0.1'

    text = Text(empty_warning=True)
    poc_types = Attribute('pocType', vocabulary=ISM_VOCABULARY,
                          xs_list=True, checks=('token',))
    security_attributes = AttributeGroup(SecurityAttributes)


class Notice(DdmsComponent):
    """A notice about the handling of a resource, made of one or more texts."""
    element_name = 'Notice'
    vocabulary = ISM_VOCABULARY
    output_name = 'notice'
    since = '4.0.1'

    notice_texts = Children(NoticeText)
    security_attributes = AttributeGroup(SecurityAttributes)
    notice_attributes = AttributeGroup(NoticeAttributes)

    def validate(self) -> None:
        super().validate()
        if not self.notice_texts:
            raise MissingRequiredFieldError(
                f'At least 1 {self.prefix}:NoticeText must exist within '
                f'an {self.qualified_name} element.'
            )


class NoticeList(DdmsComponent):
    """The list of the notices of a metacard."""
    element_name = 'noticeList'
    since = '4.0.1'

    notices = Children(Notice, min_occurs=1)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)
