# apps/registry/national_ids/management/commands/check_national_ids.py
import logging

from django.core.management.base import BaseCommand

from apps.registry.national_ids.serializers import (
    CitizenSerializer,
    NationalIdCheckSerializer,
    PersonSerializer,
    ResidentSerializer,
)
from apps.registry.national_ids.services.national_id_service import (
    check_national_id,
    check_national_ids,
    validate_with_serializer,
)
from apps.registry.national_ids.validators.checksum import classify, is_valid, mask_national_id

logger = logging.getLogger(__name__)

SAMPLE_IDS = ['1234567890', '2345678901', '3456789012', '123456789', '12345678AB', '', None]
PERSON_SAMPLES = ['1234567890', '2345678901', 'invalid', '']
CITIZEN_SAMPLES = ['1234567897', '2345678904']
RESIDENT_SAMPLES = ['2345678904', '1234567897']


class Command(BaseCommand):
    help = 'Проверяет национальные идентификаторы: демо-набор или переданные номера'

    def add_arguments(self, parser):
        parser.add_argument('ids', nargs='*', help='Идентификаторы для проверки')
        group = parser.add_mutually_exclusive_group()
        group.add_argument('--citizen-only', action='store_true', help='Требовать гражданский идентификатор')
        group.add_argument('--resident-only', action='store_true', help='Требовать идентификатор резидента')

    def handle(self, *args, **options):
        ids = options['ids']
        if ids:
            self.check_given_ids(ids, options['citizen_only'], options['resident_only'])
        else:
            self.run_demo()

    def check_given_ids(self, ids, citizen_only, resident_only):
        logger.info('Проверка %d идентификаторов', len(ids))
        for result in NationalIdCheckSerializer(check_national_ids(ids), many=True).data:
            line = f"  {result['id']}: {result['identity_type']}"
            if result['is_valid']:
                self.stdout.write(self.style.SUCCESS(line))
            else:
                self.stdout.write(self.style.ERROR(f"{line} ({result['reason']})"))

            if citizen_only:
                self.write_serializer_result(CitizenSerializer, 'citizen_id', result['id'], 'Citizen ID')
            elif resident_only:
                self.write_serializer_result(ResidentSerializer, 'resident_id', result['id'], 'Resident ID')

    def run_demo(self):
        self.stdout.write('=== Saudi National ID Validator Test ===\n')

        self.stdout.write('Test 1: Helper Method - is_valid()')
        for candidate in SAMPLE_IDS:
            shown = 'null' if candidate is None else candidate
            self.stdout.write(f'  is_valid("{shown}"): {is_valid(candidate)}')
        self.stdout.write('')

        self.stdout.write('Test 2: Helper Method - classify() with Type')
        for candidate in SAMPLE_IDS[:3]:
            self.stdout.write(f'  classify("{candidate}"): {classify(candidate).name}')
            reason = check_national_id(candidate)['reason']
            if reason:
                self.stdout.write(f'    Reason: {reason}')
        self.stdout.write('')

        self.stdout.write('Test 3: Serializer - General Validation')
        for candidate in PERSON_SAMPLES:
            self.write_serializer_result(PersonSerializer, 'national_id', candidate, 'ID')
        self.stdout.write('')

        self.stdout.write('Test 4: Serializer - Citizen Only')
        for candidate in CITIZEN_SAMPLES:
            self.write_serializer_result(CitizenSerializer, 'citizen_id', candidate, 'Citizen ID')
        self.stdout.write('')

        self.stdout.write('Test 5: Serializer - Resident Only')
        for candidate in RESIDENT_SAMPLES:
            self.write_serializer_result(ResidentSerializer, 'resident_id', candidate, 'Resident ID')
        self.stdout.write('')

        self.stdout.write(self.style.SUCCESS('=== All Tests Completed ==='))

    def write_serializer_result(self, serializer_class, field, candidate, title):
        valid, messages = validate_with_serializer(serializer_class, {field: candidate})
        line = f'  {title}: "{candidate}" - Valid: {valid}'
        if valid:
            self.stdout.write(self.style.SUCCESS(line))
            return

        logger.debug('%s отклонён для %s', serializer_class.__name__, mask_national_id(candidate))
        self.stdout.write(self.style.ERROR(line))
        for message in messages:
            self.stdout.write(f'    Error: {message}')
